"""Environment switches for remember.

``REMEMBER_HISTORY_MODE`` is read at call time. ``REMEMBER_DEFAULT_CACHE`` is
read once at import.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CACHE_NAME = "_default"
HISTORY_MODE_ENV = "REMEMBER_HISTORY_MODE"
DEFAULT_CACHE_ENV = "REMEMBER_DEFAULT_CACHE"
_VALID_HISTORY_MODES = {"purge", "legacy"}


def history_mode() -> str:
    """Return how overwrites treat history keys of the replaced record.

    ``purge`` drops reverse pointers the new record no longer claims.
    ``legacy`` keeps them (last write wins, nothing purged).
    """
    mode_raw = os.getenv(HISTORY_MODE_ENV, "purge").strip().lower()
    if mode_raw not in _VALID_HISTORY_MODES:
        logger.warning(
            "config.invalid_history_mode",
            extra={"mode": mode_raw, "fallback_mode": "purge"},
        )
        return "purge"
    return mode_raw


def read_default_cache_name() -> str:
    return os.getenv(DEFAULT_CACHE_ENV, "").strip() or DEFAULT_CACHE_NAME


# Fixed for the life of the process.
_DEFAULT_CACHE = read_default_cache_name()


def default_cache_name() -> str:
    """Name used when a caller does not pass one."""
    return _DEFAULT_CACHE
