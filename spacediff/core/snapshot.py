from __future__ import annotations

from collections.abc import ItemsView, Iterator
from pathlib import Path
from types import MappingProxyType

from .errors import DuplicatePath, SnapshotError


class Snapshot:
    """Read-only mapping of directory path to size in bytes."""

    def __init__(self, sizes: dict[str, int], source: Path | None = None) -> None:
        negative = [path for path, size_bytes in sizes.items() if size_bytes < 0]
        if negative:
            raise ValueError(f"Size cannot be negative: {negative[0]}")
        self._sizes = MappingProxyType(dict(sizes))
        self.source = source

    @staticmethod
    def new_builder(source: Path | None = None) -> SnapshotBuilder:
        return SnapshotBuilder(source)

    def get(self, path: str, default: int | None = None) -> int | None:
        return self._sizes.get(path, default)

    def size(self) -> int:
        return len(self._sizes)

    def total_bytes(self) -> int:
        return sum(self._sizes.values())

    def items(self) -> ItemsView[str, int]:
        return self._sizes.items()

    def __len__(self) -> int:
        return len(self._sizes)

    def __contains__(self, path: object) -> bool:
        return path in self._sizes

    def __iter__(self) -> Iterator[str]:
        return iter(self._sizes)

    def __repr__(self) -> str:
        return f"Snapshot(entries={len(self._sizes)}, source={self.source!r})"


class SnapshotBuilder:
    def __init__(self, source: Path | None = None) -> None:
        self._sizes: dict[str, int] = {}
        self._source = source
        self._finished = False

    def add(self, path: str, size_bytes: int) -> None:
        if self._finished:
            raise SnapshotError("Snapshot builder already finished")
        if size_bytes < 0:
            raise ValueError(f"Size cannot be negative: {size_bytes}")
        if path in self._sizes:
            raise DuplicatePath(path)
        self._sizes[path] = size_bytes

    def finish(self) -> Snapshot:
        if self._finished:
            raise SnapshotError("Snapshot builder already finished")
        self._finished = True
        snapshot = Snapshot(self._sizes, self._source)
        self._sizes = {}
        return snapshot
