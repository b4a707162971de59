from __future__ import annotations

import codecs
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .errors import DuplicatePath, FileReadError, InvalidSizeUnit
from .size_converter import SizeUnitConverter
from .snapshot import Snapshot

logger = logging.getLogger(__name__)

# drive and path prefix, path remainder, trailing bracketed size
_LINE_PATTERN = re.compile(r"(.*):(.*) \[(.*)\]")


@dataclass(frozen=True)
class ParsedEntry:
    path: str
    formatted_size: str


def match_line(line: str) -> ParsedEntry | None:
    """Return the directory entry on a report line, or None for other lines.

    Trailing whitespace is ignored; the rest of the line has to be
    ``<drive>:<path> [<size>]``. Headers, totals and blank lines give None.
    """
    match = _LINE_PATTERN.fullmatch(line.rstrip())
    if not match:
        return None
    drive, remainder, formatted_size = match.groups()
    return ParsedEntry(path=f"{drive}:{remainder}", formatted_size=formatted_size)


class ReportParser:
    """Builds a Snapshot from a SpaceSniffer "grouped by folder" export."""

    def __init__(
        self,
        converter: type[SizeUnitConverter] = SizeUnitConverter,
        *,
        encoding: str = "utf-8",
    ) -> None:
        self._converter = converter
        self._encoding = encoding

    def parse(self, lines: Iterable[str], source: Path | None = None) -> Snapshot:
        builder = Snapshot.new_builder(source)
        skipped = 0
        for line_number, line in enumerate(lines, start=1):
            entry = match_line(line)
            if entry is None:
                skipped += 1
                continue
            try:
                size_bytes = self._converter.convert(entry.formatted_size)
            except InvalidSizeUnit as exc:
                raise InvalidSizeUnit(exc.value, line_number) from exc
            try:
                builder.add(entry.path, size_bytes)
            except DuplicatePath as exc:
                raise DuplicatePath(exc.path, line_number) from exc

        snapshot = builder.finish()
        logger.debug("Skipped %d non-entry lines", skipped)
        return snapshot

    def load(self, path: Path) -> Snapshot:
        try:
            codecs.lookup(self._encoding)
        except LookupError as exc:
            raise FileReadError(str(path), str(exc)) from exc
        try:
            with path.open("r", encoding=self._encoding) as handle:
                snapshot = self.parse(handle, source=path)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(str(path), str(exc)) from exc
        logger.info("Loaded %d directories from %s", snapshot.size(), path)
        return snapshot
