from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..core.errors import SnapshotError
from ..core.protocols import SnapshotLoaderProtocol
from ..core.snapshot import Snapshot


class Command(ABC):
    @abstractmethod
    def run(self) -> int:
        raise NotImplementedError


def load_or_exit(loader: SnapshotLoaderProtocol, report: Path) -> Snapshot:
    try:
        return loader.load(report)
    except SnapshotError as exc:
        raise SystemExit(f"Could not load {report}: {exc}") from exc
