"""Process-wide table of named file caches.

Caches are created on first use and live until the process exits. Wiping
a cache empties it in place, so stages already bound to it see the wipe.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .config import default_cache_name
from .diagnostics import warn
from .errors import UsageError
from .file_cache import FileCache

logger = logging.getLogger(__name__)

_EMPTY: Mapping = MappingProxyType({})


def normalize_cache_name(name: object) -> str:
    """Resolve a caller-supplied cache name to its registry key.

    ``None`` and ``""`` select the default cache; numbers are keyed by their
    string form so ``1``, ``1.0`` and ``"1"`` share a cache.

    Raises:
        UsageError: if ``name`` is not None, a string or a number.
    """
    if name is None or name == "":
        return default_cache_name()
    if isinstance(name, str):
        return name
    if isinstance(name, (int, float)) and not isinstance(name, bool):
        if isinstance(name, float) and name.is_integer():
            return str(int(name))
        return str(name)
    raise UsageError(
        f"cache name must be None, a number or a string, got {type(name).__name__}"
    )


class CacheRegistry:
    """Owns every FileCache, addressed by name."""

    def __init__(self):
        self._caches: dict[str, FileCache] = {}

    def __contains__(self, name: object) -> bool:
        return normalize_cache_name(name) in self._caches

    def __len__(self) -> int:
        return len(self._caches)

    def names(self) -> list[str]:
        return list(self._caches)

    def get(self, name: object = None) -> FileCache | None:
        """Return the named cache without creating it."""
        return self._caches.get(normalize_cache_name(name))

    def get_or_create(self, name: object = None) -> FileCache:
        """Return the named cache, creating an empty one on first use."""
        key = normalize_cache_name(name)
        cache = self._caches.get(key)
        if cache is None:
            cache = self._caches[key] = FileCache(key)
            logger.debug("registry.cache_created", extra={"cache_name": key})
        return cache

    def wipe(self, name: object = None) -> bool:
        """Empty the named cache in place. Warns if it does not exist."""
        key = normalize_cache_name(name)
        cache = self._caches.get(key)
        if cache is None:
            warn(
                f"cannot wipe cache {key}: cache not found",
                event="registry.cache_missing",
                cache_name=key,
            )
            return False
        cache.clear()
        logger.debug("registry.wiped", extra={"cache_name": key})
        return True

    def files_for(self, name: object = None) -> Mapping:
        """Read-only live view of the named cache's ``files`` map."""
        cache = self.get(name)
        return MappingProxyType(cache.files) if cache is not None else _EMPTY

    def history_for(self, name: object = None) -> Mapping:
        """Read-only live view of the named cache's ``history`` map."""
        cache = self.get(name)
        return MappingProxyType(cache.history) if cache is not None else _EMPTY


DEFAULT_REGISTRY = CacheRegistry()


def resolve_registry(registry: CacheRegistry | None) -> CacheRegistry:
    return DEFAULT_REGISTRY if registry is None else registry


def cache_for(cache_name: object = None, *, registry: CacheRegistry | None = None) -> Mapping:
    """Return the records remembered under ``cache_name`` (read-only)."""
    return resolve_registry(registry).files_for(cache_name)


def history_for(cache_name: object = None, *, registry: CacheRegistry | None = None) -> Mapping:
    """Return the history index of ``cache_name`` (read-only)."""
    return resolve_registry(registry).history_for(cache_name)
