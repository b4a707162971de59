from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from spacediff.commands.compare_command import CompareCommand
from spacediff.core.compare_config import CompareConfig
from spacediff.core.differ import DiffEntry
from spacediff.core.errors import InvalidSizeUnit
from spacediff.core.snapshot import Snapshot
from tests.conftest import FixedClock


OLDER = Path("older.txt")
NEWER = Path("newer.txt")


class LoaderStub:
    def __init__(self, sizes: dict[Path, dict[str, int]]) -> None:
        self._sizes = sizes
        self.calls: list[Path] = []

    def load(self, path: Path) -> Snapshot:
        self.calls.append(path)
        builder = Snapshot.new_builder(path)
        for directory, size_bytes in self._sizes[path].items():
            builder.add(directory, size_bytes)
        return builder.finish()


class FailingLoader:
    def load(self, path: Path) -> Snapshot:
        raise InvalidSizeUnit("12XB", 4)


class DifferStub:
    def __init__(self, result: list[DiffEntry]) -> None:
        self._result = result
        self.calls: list[tuple[int, int]] = []

    def diff(self, newer: Snapshot, older: Snapshot) -> list[DiffEntry]:
        self.calls.append((newer.size(), older.size()))
        return self._result


def _loader() -> LoaderStub:
    return LoaderStub({OLDER: {"C:\\a": 1}, NEWER: {"C:\\a": 3, "C:\\b": 1, "C:\\c": 1}})


def test_compare_prints_growth_and_writes_report(
    sample_config: CompareConfig,
    fixed_clock: FixedClock,
    capsys: pytest.CaptureFixture[str],
) -> None:
    loader = _loader()
    differ = DifferStub([DiffEntry("C:\\a", 2), DiffEntry("C:\\b", 1)])

    result = CompareCommand(sample_config, OLDER, NEWER, loader, differ, fixed_clock).run()

    assert result == 0
    assert loader.calls == [OLDER, NEWER]
    assert differ.calls == [(3, 1)]

    report_file = sample_config.output_dir / "growth-20260216-010203.txt"
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Older report loaded (1 directories)",
        "Newer report loaded (3 directories)",
        "C:\\a - increased ~2 bytes",
        "C:\\b - increased ~1 bytes",
        f"Growth report written: {report_file}",
    ]

    text = report_file.read_text(encoding="utf-8")
    assert "Generated: 2026-02-16T01:02:03Z" in text
    assert "Older report: older.txt" in text
    assert "Newer report: newer.txt" in text
    assert text.endswith("C:\\a - increased ~2 bytes\nC:\\b - increased ~1 bytes\n")


def test_compare_applies_result_limit(
    sample_config: CompareConfig,
    fixed_clock: FixedClock,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = replace(sample_config, result_limit=1, output_dir=None)
    differ = DifferStub([DiffEntry("C:\\a", 2), DiffEntry("C:\\b", 1)])

    CompareCommand(config, OLDER, NEWER, _loader(), differ, fixed_clock).run()

    out = capsys.readouterr().out
    assert "C:\\a - increased ~2 bytes" in out
    assert "C:\\b" not in out
    assert "Growth report written" not in out


def test_compare_reports_no_growth(
    sample_config: CompareConfig,
    fixed_clock: FixedClock,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = replace(sample_config, output_dir=None)

    result = CompareCommand(config, OLDER, NEWER, _loader(), DifferStub([]), fixed_clock).run()

    assert result == 0
    assert "(no growth)" in capsys.readouterr().out
    assert list(sample_config.output_dir.iterdir()) == []


def test_compare_exits_when_a_report_fails_to_load(
    sample_config: CompareConfig,
    fixed_clock: FixedClock,
) -> None:
    differ = DifferStub([])
    command = CompareCommand(sample_config, OLDER, NEWER, FailingLoader(), differ, fixed_clock)

    with pytest.raises(SystemExit, match="Could not load older.txt: Invalid size"):
        command.run()

    assert differ.calls == []
