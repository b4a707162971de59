from __future__ import annotations

import logging
import os
from pathlib import Path

from .compare_config import CompareConfig


class ConfigLoader:
    def __init__(self, project_root: Path) -> None:
        self._project_root = project_root

    @property
    def default_env_file(self) -> Path:
        return self._project_root / "config" / "spacediff.env"

    def load(self, env_path: str | None = None) -> CompareConfig:
        if env_path:
            env_file: Path | None = Path(env_path).expanduser()
            if not env_file.is_file():
                raise SystemExit(f"Missing env file: {env_file}")
        elif self.default_env_file.is_file():
            env_file = self.default_env_file
        else:
            return CompareConfig(project_root=self._project_root, env_file=None)

        env_values = self._parse_env_file(env_file)

        output_dir = None
        if env_values.get("OUTPUT_DIR"):
            output_dir = self._resolve_path(env_values["OUTPUT_DIR"], env_file)
            output_dir.mkdir(parents=True, exist_ok=True)

        return CompareConfig(
            project_root=self._project_root,
            env_file=env_file,
            report_encoding=env_values.get("REPORT_ENCODING") or "utf-8",
            diff_workers=self._int_value(env_values, "DIFF_WORKERS", "1", minimum=1),
            result_limit=self._int_value(env_values, "RESULT_LIMIT", "0", minimum=0),
            output_dir=output_dir,
            log_level=self._log_level(env_values.get("LOG_LEVEL") or "WARNING"),
        )

    def _parse_env_file(self, env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        for raw_line in env_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            values[key.strip()] = os.path.expandvars(cleaned)
        return values

    def _int_value(
        self,
        env_values: dict[str, str],
        name: str,
        default: str,
        *,
        minimum: int,
    ) -> int:
        raw = env_values.get(name) or default
        try:
            value = int(raw)
        except ValueError:
            raise SystemExit(f"Invalid config value for {name}: {raw}") from None
        if value < minimum:
            raise SystemExit(f"Invalid config value for {name}: {raw} (minimum {minimum})")
        return value

    def _log_level(self, raw: str) -> str:
        level = raw.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise SystemExit(f"Invalid config value for LOG_LEVEL: {raw}")
        return level

    def _resolve_path(self, value: str, env_file: Path) -> Path:
        resolved = Path(value).expanduser()
        if not resolved.is_absolute():
            resolved = env_file.parent / resolved
        return resolved
