from __future__ import annotations

import re
from decimal import Decimal

from .errors import InvalidSizeUnit


class SizeUnitConverter:
    """Turns SpaceSniffer sizes such as ``3.2MB`` into byte counts.

    Units are decimal (``KB`` is 1000 bytes) and case-sensitive; the
    lowercase ``b`` is how the export spells plain bytes.
    """

    _pattern = re.compile(r"(\d+)(?:\.(\d+))?(.*)", re.ASCII | re.DOTALL)
    _max_bytes = 2**64 - 1
    _multipliers = {
        "b": 1,
        "KB": 1000,
        "MB": 1000**2,
        "GB": 1000**3,
        "TB": 1000**4,
    }

    @classmethod
    def convert(cls, formatted: str) -> int:
        match = cls._pattern.fullmatch(formatted)
        if not match:
            raise InvalidSizeUnit(formatted)
        integer_part, fraction_part, unit = match.groups()
        multiplier = cls._multipliers.get(unit)
        if multiplier is None:
            raise InvalidSizeUnit(formatted)
        value = Decimal(f"{integer_part}.{fraction_part or '0'}")
        # int() on a Decimal truncates toward zero
        size_bytes = int(value * multiplier)
        if size_bytes > cls._max_bytes:
            raise InvalidSizeUnit(formatted)
        return size_bytes
