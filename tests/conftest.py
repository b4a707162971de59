from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from spacediff.core.compare_config import CompareConfig


class FixedClock:
    def __init__(self) -> None:
        self._timestamp = "20260216-010203"
        self._iso = "2026-02-16T01:02:03Z"

    def now_iso(self) -> str:
        return self._iso

    def timestamp(self) -> str:
        return self._timestamp


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def sample_config(tmp_path: Path) -> CompareConfig:
    output_dir = tmp_path / "growth"
    output_dir.mkdir(parents=True, exist_ok=True)
    return CompareConfig(
        project_root=tmp_path / "project",
        env_file=tmp_path / "spacediff.env",
        output_dir=output_dir,
    )


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[[str, list[str]], Path]:
    def _write(name: str, lines: list[str]) -> Path:
        report = tmp_path / name
        report.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return report

    return _write
