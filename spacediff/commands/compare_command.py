from __future__ import annotations

from pathlib import Path

from ..core.compare_config import CompareConfig
from ..core.differ import DiffEntry
from ..core.protocols import ClockProtocol, SnapshotDifferProtocol, SnapshotLoaderProtocol
from .base import Command, load_or_exit


class CompareCommand(Command):
    def __init__(
        self,
        config: CompareConfig,
        older_report: Path,
        newer_report: Path,
        loader: SnapshotLoaderProtocol,
        differ: SnapshotDifferProtocol,
        clock: ClockProtocol,
    ) -> None:
        self._config = config
        self._older_report = older_report
        self._newer_report = newer_report
        self._loader = loader
        self._differ = differ
        self._clock = clock

    def run(self) -> int:
        older = load_or_exit(self._loader, self._older_report)
        print(f"Older report loaded ({older.size()} directories)")
        newer = load_or_exit(self._loader, self._newer_report)
        print(f"Newer report loaded ({newer.size()} directories)")

        growth = self._differ.diff(newer, older)
        if self._config.result_limit:
            growth = growth[:self._config.result_limit]

        lines = self._format(growth) or ["(no growth)"]
        print("\n".join(lines))

        if self._config.output_dir is not None:
            report_file = self._config.output_dir / f"growth-{self._clock.timestamp()}.txt"
            header = [
                "Directory growth report",
                f"Generated: {self._clock.now_iso()}",
                f"Older report: {self._older_report}",
                f"Newer report: {self._newer_report}",
                "",
            ]
            report_file.write_text("\n".join(header + lines) + "\n", encoding="utf-8")
            print(f"Growth report written: {report_file}")
        return 0

    def _format(self, growth: list[DiffEntry]) -> list[str]:
        return [f"{entry.path} - increased ~{entry.delta_bytes} bytes" for entry in growth]
