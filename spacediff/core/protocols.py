from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .differ import DiffEntry
from .snapshot import Snapshot


class SnapshotLoaderProtocol(Protocol):
    def load(self, path: Path) -> Snapshot:
        ...


class SnapshotDifferProtocol(Protocol):
    def diff(self, newer: Snapshot, older: Snapshot) -> list[DiffEntry]:
        ...


class ClockProtocol(Protocol):
    def now_iso(self) -> str:
        ...

    def timestamp(self) -> str:
        ...
