"""Remember stage: cache every record of a run, replay the whole cache at the end.

A stage is bound to one named cache when it is built. During the run each
incoming record is stored silently. When input ends the stage emits every
record the cache holds, including ones cached by earlier runs, then
closes. Aborting a run closes the stage without a flush; records already
written stay cached.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator

from .config import history_mode
from .errors import StageStateError
from .file_cache import FileCache
from .protocols import Record
from .registry import CacheRegistry, normalize_cache_name, resolve_registry

logger = logging.getLogger(__name__)


class StageState(str, enum.Enum):
    OPEN = "open"
    FLUSHING = "flushing"
    CLOSED = "closed"


class RememberStage:
    """Pipeline step that remembers every record it has ever seen.

    Args:
        cache_name: Cache to bind to. None selects the default cache.
        registry: Registry owning the cache. Defaults to the process-wide one.
    """

    def __init__(self, cache_name: object = None, *, registry: CacheRegistry | None = None):
        self.cache_name = normalize_cache_name(cache_name)
        self.cache: FileCache = resolve_registry(registry).get_or_create(self.cache_name)
        self._purge_stale = history_mode() == "purge"
        self._state = StageState.OPEN

    def __repr__(self) -> str:
        return f"RememberStage(cache_name={self.cache_name!r}, state={self._state.value})"

    @property
    def state(self) -> StageState:
        return self._state

    def write(self, record: Record) -> None:
        """Store ``record`` in the bound cache. Nothing is emitted."""
        self._require_open("write")
        self.cache.upsert(record, purge_stale=self._purge_stale)
        logger.debug(
            "stage.record_cached",
            extra={"cache_name": self.cache_name, "path": record.path},
        )

    def end(self) -> list[Record]:
        """Signal end of input and return every record the cache holds.

        Runs the whole Flushing -> Closed cycle before returning.
        """
        self._require_open("end")
        return list(self._flush())

    def abort(self) -> None:
        """Close without flushing. Cached records are kept."""
        if self._state is StageState.CLOSED:
            return
        self._state = StageState.CLOSED
        logger.debug("stage.aborted", extra={"cache_name": self.cache_name})

    def process(self, records: Iterable[Record]) -> Iterator[Record]:
        """Run the stage over ``records`` and yield the flushed cache.

        The stage stays FLUSHING while records are yielded and closes once
        the last one is consumed or the consumer stops early.
        """
        for record in records:
            self.write(record)
        self._require_open("end")
        yield from self._flush()

    __call__ = process

    def _flush(self) -> Iterator[Record]:
        self._state = StageState.FLUSHING
        emitted = 0
        try:
            for record in self.cache.records():
                emitted += 1
                yield record
        finally:
            self._state = StageState.CLOSED
            logger.debug(
                "stage.flushed",
                extra={"cache_name": self.cache_name, "emitted": emitted},
            )

    def _require_open(self, action: str) -> None:
        if self._state is not StageState.OPEN:
            raise StageStateError(
                f"cannot {action} stage for cache {self.cache_name}: stage is {self._state.value}"
            )


def remember(cache_name: object = None, *, registry: CacheRegistry | None = None) -> RememberStage:
    """Build a stage bound to ``cache_name``, creating the cache if needed."""
    return RememberStage(cache_name, registry=registry)
