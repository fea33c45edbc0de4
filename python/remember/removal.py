"""Remove records from a named cache.

``forget`` and ``forget_using_history`` accept ``(cache_name, path)`` or a
lone ``path``, in which case the default cache is used. Missing caches and
missing paths are soft failures: a warning is logged and nothing changes.
"""

from __future__ import annotations

import logging

from .diagnostics import warn
from .registry import CacheRegistry, normalize_cache_name, resolve_registry

logger = logging.getLogger(__name__)

_MISSING = object()


def _shift_args(cache_name: object, path: object) -> tuple[str, object]:
    if path is _MISSING:
        return normalize_cache_name(None), cache_name
    return normalize_cache_name(cache_name), path


def forget(cache_name, path=_MISSING, *, registry: CacheRegistry | None = None) -> bool:
    """Forget the record stored at ``path`` in ``cache_name``.

    Returns:
        True if a record was removed, False if a warning was logged instead.
    """
    key, path = _shift_args(cache_name, path)
    cache = resolve_registry(registry).get(key)
    if cache is None:
        warn(
            f"forget() warning: cache {key} not found",
            event="forget.cache_missing",
            cache_name=key,
            path=path,
        )
        return False
    if path not in cache.files:
        warn(
            f"forget() warning: file {path} not found in cache {key}",
            event="forget.file_missing",
            cache_name=key,
            path=path,
        )
        return False
    cache.remove(path)
    logger.debug("forget.removed", extra={"cache_name": key, "path": path})
    return True


def forget_using_history(cache_name, path=_MISSING, *, registry: CacheRegistry | None = None) -> bool:
    """Forget a record by its current path or any path it used to have.

    A current path takes priority over a history match.
    """
    key, path = _shift_args(cache_name, path)
    registry = resolve_registry(registry)
    cache = registry.get(key)
    if cache is None:
        warn(
            f"forget_using_history() warning: cache {key} not found",
            event="forget.cache_missing",
            cache_name=key,
            path=path,
        )
        return False
    current = cache.resolve(path)
    if current is None:
        warn(
            f"forget_using_history() warning: file {path} not found in cache {key}",
            event="forget.file_missing",
            cache_name=key,
            path=path,
        )
        return False
    return forget(key, current, registry=registry)


def forget_all(cache_name=None, *, registry: CacheRegistry | None = None) -> bool:
    """Forget every record in ``cache_name``. Warns if the cache does not exist."""
    key = normalize_cache_name(cache_name)
    cache = resolve_registry(registry).get(key)
    if cache is None:
        warn(
            f"forget_all() warning: cache {key} not found",
            event="forget.cache_missing",
            cache_name=key,
        )
        return False
    cache.clear()
    logger.debug("forget.cleared", extra={"cache_name": key})
    return True
