"""Named in-process cache of file records keyed by path.

This is NOT persistent across processes. Each cache keeps two maps:
``files`` (current path -> record) and ``history`` (any path a record has
ever had -> its current path). Both are only mutated through ``upsert``,
``remove`` and ``clear`` so every history value points at a stored record
whose history contains the key.
"""

from .protocols import Record, record_history


class FileCache:
    """In-process dict cache keyed by current path, indexed by history."""

    def __init__(self, name: str):
        self.name = name
        self.files: dict[str, Record] = {}
        self.history: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, path: object) -> bool:
        return path in self.files

    def __repr__(self) -> str:
        return f"FileCache(name={self.name!r}, files={len(self.files)})"

    def upsert(self, record: Record, purge_stale: bool = True) -> None:
        """Store ``record`` at its path and point its history at it.

        With ``purge_stale``, history keys left over from a record previously
        stored at the same path are dropped when the new record does not
        claim them.
        """
        path = record.path
        claimed = record_history(record)
        if purge_stale and path in self.files:
            keep = set(claimed)
            for old in [h for h, cur in self.history.items() if cur == path]:
                if old not in keep:
                    del self.history[old]
        self.files[path] = record
        for old in claimed:
            self.history[old] = path

    def remove(self, path: str) -> Record:
        """Drop the record at ``path`` and every history entry pointing at it.

        Raises:
            KeyError: if nothing is stored at ``path``.
        """
        record = self.files[path]
        for old in [h for h, cur in self.history.items() if cur == path]:
            del self.history[old]
        del self.files[path]
        return record

    def resolve(self, path: str) -> str | None:
        """Return the current path for ``path``, checking history second."""
        if path in self.files:
            return path
        return self.history.get(path)

    def records(self) -> list[Record]:
        """Snapshot of stored records in insertion order, skipping removal markers."""
        return [record for record in self.files.values() if record is not None]

    def clear(self) -> None:
        """Clear all cached entries in place."""
        self.files.clear()
        self.history.clear()
