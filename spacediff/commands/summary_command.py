from __future__ import annotations

from pathlib import Path

from ..core.protocols import SnapshotLoaderProtocol
from .base import Command, load_or_exit


class SummaryCommand(Command):
    def __init__(self, reports: list[Path], loader: SnapshotLoaderProtocol) -> None:
        self._reports = reports
        self._loader = loader

    def run(self) -> int:
        for report in self._reports:
            snapshot = load_or_exit(self._loader, report)
            print(f"{report}: {snapshot.size()} directories, {snapshot.total_bytes()} bytes")
        return 0
