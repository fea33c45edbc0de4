"""Remember every file record that passes through a pipeline stage.

Usage::

    import remember

    stage = remember.remember("scripts")
    for record in stage.process(changed_files):
        ...  # every file ever seen by the "scripts" cache

    remember.forget("scripts", "src/old.js")
    remember.forget_using_history("scripts", "src/renamed-from.js")
    remember.forget_all("scripts")
"""

from .config import DEFAULT_CACHE_NAME
from .diagnostics import PLUGIN_NAME
from .errors import StageStateError, UsageError
from .protocols import File, Record
from .registry import DEFAULT_REGISTRY, CacheRegistry, cache_for, history_for
from .removal import forget, forget_all, forget_using_history
from .stage import RememberStage, StageState, remember

__all__ = [
    "DEFAULT_CACHE_NAME",
    "DEFAULT_REGISTRY",
    "PLUGIN_NAME",
    "CacheRegistry",
    "File",
    "Record",
    "RememberStage",
    "StageState",
    "StageStateError",
    "UsageError",
    "cache_for",
    "forget",
    "forget_all",
    "forget_using_history",
    "history_for",
    "remember",
]
