from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class CompareConfig:
    project_root: Path
    env_file: Path | None
    report_encoding: str = "utf-8"
    diff_workers: int = 1
    result_limit: int = 0
    output_dir: Path | None = None
    log_level: str = "WARNING"
