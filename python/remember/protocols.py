"""Record protocol for remember.

Defines the Record protocol the cache stores and replays, plus a minimal
File dataclass for callers that do not bring their own record type.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


class Record(Protocol):
    """Anything with a path, opaque contents and an ordered path history."""

    path: str
    contents: Any
    history: Sequence[str]


@dataclass
class File:
    """Lightweight file record flowing through a pipeline."""
    path: str
    contents: Any = None
    history: list[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.history:
            self.history = [self.path]

    def rename(self, path: str) -> None:
        """Move the file to ``path``, keeping the old path in its history."""
        if path != self.path:
            self.history.append(path)
            self.path = path


def record_history(record: Record) -> list[str]:
    """Return the record's history, or ``[record.path]`` when it has none."""
    history = getattr(record, "history", None)
    if not history:
        return [record.path]
    if isinstance(history, str):
        return [history]
    return list(history)
