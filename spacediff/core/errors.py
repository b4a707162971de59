from __future__ import annotations


class SnapshotError(Exception):
    """Base class for failures while loading or building a snapshot."""


class InvalidSizeUnit(SnapshotError):
    def __init__(self, value: str, line_number: int | None = None) -> None:
        self.value = value
        self.line_number = line_number
        message = f"Invalid size: {value!r}"
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class DuplicatePath(SnapshotError):
    def __init__(self, path: str, line_number: int | None = None) -> None:
        self.path = path
        self.line_number = line_number
        message = f"Duplicate path: {path}"
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class FileReadError(SnapshotError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read report {path}: {reason}")
