from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .snapshot import Snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffEntry:
    path: str
    delta_bytes: int

    def __post_init__(self) -> None:
        if self.delta_bytes <= 0:
            raise ValueError(f"Growth must be positive: {self.delta_bytes}")


class SnapshotDiffer:
    """Lists the directories of a newer snapshot that grew since an older one.

    A path missing from the older snapshot counts as having grown from zero.
    Paths that shrank, stayed the same or only exist in the older snapshot
    are left out. Results are ordered by growth, largest first, then by path.
    """

    def __init__(self, workers: int = 1, chunk_size: int = 10_000) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1: {workers}")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1: {chunk_size}")
        self._workers = workers
        self._chunk_size = chunk_size

    def diff(self, newer: Snapshot, older: Snapshot) -> list[DiffEntry]:
        items = list(newer.items())
        if self._workers == 1 or len(items) <= self._chunk_size:
            entries = self._growth(items, older)
        else:
            chunks = [
                items[start:start + self._chunk_size]
                for start in range(0, len(items), self._chunk_size)
            ]
            logger.debug(
                "Diffing %d entries in %d chunks on %d workers",
                len(items),
                len(chunks),
                self._workers,
            )
            with ThreadPoolExecutor(max_workers=self._workers) as pool:
                results = pool.map(lambda chunk: self._growth(chunk, older), chunks)
                entries = [entry for chunk_entries in results for entry in chunk_entries]

        entries.sort(key=lambda entry: (-entry.delta_bytes, entry.path))
        logger.info("%d of %d directories grew", len(entries), len(items))
        return entries

    def _growth(
        self,
        items: Sequence[tuple[str, int]],
        older: Snapshot,
    ) -> list[DiffEntry]:
        entries: list[DiffEntry] = []
        for path, size_bytes in items:
            delta = size_bytes - older.get(path, 0)
            if delta > 0:
                entries.append(DiffEntry(path, delta))
        return entries
