from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..core.clock import Clock
from ..core.compare_config import CompareConfig
from ..core.config_loader import ConfigLoader
from ..core.differ import SnapshotDiffer
from ..core.protocols import ClockProtocol, SnapshotDifferProtocol, SnapshotLoaderProtocol
from ..core.report_parser import ReportParser
from .base import Command
from .compare_command import CompareCommand
from .summary_command import SummaryCommand


def _default_loader(config: CompareConfig) -> SnapshotLoaderProtocol:
    return ReportParser(encoding=config.report_encoding)


def _default_differ(config: CompareConfig) -> SnapshotDifferProtocol:
    return SnapshotDiffer(workers=config.diff_workers)


class CommandFactory:
    def __init__(
        self,
        project_root: Path,
        *,
        config_loader: ConfigLoader | None = None,
        clock: ClockProtocol | None = None,
        loader_factory: Callable[[CompareConfig], SnapshotLoaderProtocol] | None = None,
        differ_factory: Callable[[CompareConfig], SnapshotDifferProtocol] | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader(project_root)
        self._clock = clock or Clock()
        self._loader_factory = loader_factory or _default_loader
        self._differ_factory = differ_factory or _default_differ

    def load_config(self, env_file: str | None) -> CompareConfig:
        return self._config_loader.load(env_file)

    def create(self, action: str, reports: list[str], config: CompareConfig) -> Command:
        report_paths = [Path(report).expanduser() for report in reports]
        loader = self._loader_factory(config)

        if action == "compare":
            if len(report_paths) != 2:
                raise SystemExit("compare needs exactly two reports: OLDER NEWER")
            older, newer = report_paths
            return CompareCommand(
                config,
                older,
                newer,
                loader,
                self._differ_factory(config),
                self._clock,
            )
        if action == "summary":
            if not report_paths:
                raise SystemExit("summary needs at least one report")
            return SummaryCommand(report_paths, loader)
        raise SystemExit(f"Unsupported action: {action}")
