"""Soft-warning channel.

Forgetting or wiping something that is not there is not an error: the
call logs a warning and returns without touching any cache. Warnings are
emitted as ``logger.warning("%s: %s", PLUGIN_NAME, message)`` so the
plugin name is the first argument of the record and the human-readable
message the second. Structured fields travel in ``extra``.
"""

import logging

logger = logging.getLogger(__name__)

PLUGIN_NAME = "remember"


def warn(message: str, *, event: str, cache_name: str, path: str | None = None) -> None:
    extra = {
        "event": event,
        "plugin": PLUGIN_NAME,
        "cache_name": cache_name,
    }
    if path is not None:
        extra["path"] = path
    logger.warning("%s: %s", PLUGIN_NAME, message, extra=extra)
