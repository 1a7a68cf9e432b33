"""Closed error taxonomy for the CSV engine."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    IO = "Io"
    PARSE = "Parse"
    ENCODING = "Encoding"
    FIELD_COUNT_MISMATCH = "FieldCountMismatch"
    EMPTY_DATA = "EmptyData"
    WRITE_PERMISSION = "WritePermission"
    INVALID_DATA = "InvalidData"


_PREFIXES = {
    ErrorKind.IO: "IO Error",
    ErrorKind.PARSE: "Parse Error",
    ErrorKind.ENCODING: "Encoding Error",
    ErrorKind.FIELD_COUNT_MISMATCH: "Field Count Mismatch",
    ErrorKind.EMPTY_DATA: "Empty Data",
    ErrorKind.WRITE_PERMISSION: "Write Permission Error",
    ErrorKind.INVALID_DATA: "Invalid Data Error",
}

EMPTY_DATA_MESSAGE = "CSV data is empty"


def field_count_message(line: int, expected: int, actual: int) -> str:
    return f"Field count mismatch at line {line}: expected {expected} fields, got {actual} fields"


class CsvError(Exception):
    """
    Base class for every failure raised by the engine.

    `kind` identifies the taxonomy entry; `message` is the text without the
    kind prefix that str(exc) carries.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(f"{_PREFIXES[self.kind]}: {message}")
        self.message = message


class CsvIoError(CsvError):
    kind = ErrorKind.IO


class CsvParseError(CsvError):
    kind = ErrorKind.PARSE


class CsvEncodingError(CsvError):
    kind = ErrorKind.ENCODING


class FieldCountMismatchError(CsvError):
    """A parsed row's width differs from the first row's width."""

    kind = ErrorKind.FIELD_COUNT_MISMATCH

    def __init__(self, *, line: int, expected: int, actual: int) -> None:
        super().__init__(field_count_message(line, expected, actual))
        self.line = line            # 1-based record index
        self.expected = expected
        self.actual = actual


class EmptyDataError(CsvError):
    kind = ErrorKind.EMPTY_DATA

    def __init__(self, message: str = EMPTY_DATA_MESSAGE) -> None:
        super().__init__(message)


class WritePermissionError(CsvError):
    kind = ErrorKind.WRITE_PERMISSION


class InvalidDataError(CsvError):
    """Caller-supplied rows failed shape validation before writing."""

    kind = ErrorKind.INVALID_DATA

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.expected = expected
        self.actual = actual

    @classmethod
    def field_count(cls, *, line: int, expected: int, actual: int) -> "InvalidDataError":
        return cls(field_count_message(line, expected, actual), line=line, expected=expected, actual=actual)


__all__ = [
    "ErrorKind",
    "CsvError",
    "CsvIoError",
    "CsvParseError",
    "CsvEncodingError",
    "FieldCountMismatchError",
    "EmptyDataError",
    "WritePermissionError",
    "InvalidDataError",
]
