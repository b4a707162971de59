#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .commands.factory import CommandFactory


class CliApplication:
    def __init__(self, project_root: Path) -> None:
        self._factory = CommandFactory(project_root)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="spacediff",
            description="Show which directories grew between two SpaceSniffer reports",
        )
        parser.add_argument("action", choices=["compare", "summary"])
        parser.add_argument(
            "reports",
            nargs="+",
            help="Report files; compare takes OLDER NEWER",
        )
        parser.add_argument(
            "--env-file",
            default=None,
            help="Optional path to env file (default: config/spacediff.env)",
        )
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        config = self._factory.load_config(args.env_file)
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        command = self._factory.create(args.action, args.reports, config)
        return command.run()


def main() -> int:
    project_root = Path(__file__).resolve().parent.parent
    app = CliApplication(project_root)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
