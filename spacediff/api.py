from __future__ import annotations

from pathlib import Path

from .core.differ import DiffEntry, SnapshotDiffer
from .core.report_parser import ReportParser
from .core.snapshot import Snapshot


def load_snapshot(file_path: str | Path, *, encoding: str = "utf-8") -> Snapshot:
    """Parse one report file.

    Raises InvalidSizeUnit, DuplicatePath or FileReadError; nothing is
    returned from a report that fails part way through.
    """
    return ReportParser(encoding=encoding).load(Path(file_path))


def compare_snapshots(
    newer: Snapshot,
    older: Snapshot,
    *,
    workers: int = 1,
) -> list[DiffEntry]:
    return SnapshotDiffer(workers=workers).diff(newer, older)
