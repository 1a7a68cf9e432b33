"""
gridcsv — rectangular CSV codec with optional integer/float inference.

Contract (v0):
- Comma delimiter, double-quote quoting, quotes escaped by doubling.
- No header row: every record (including the first) is returned as data.
  Callers wanting a header slice row 0 themselves.
- Blank lines are skipped. Every record must have the same number of fields
  as the first, else FieldCountMismatchError (1-based line, expected, actual).
- Empty or whitespace-only input -> EmptyDataError.
- Trim mode strips ASCII whitespace around every field (quoted or not).
- Typed readers classify each field, first match wins:
    "" -> "" ; 64-bit integer literal -> int ; finite float literal -> float ;
    else -> str (unchanged). NaN/Infinity spellings stay str; integer
    literals beyond 64 bits become float.
  In trim mode classification runs on the trimmed field.
- Writing: rows must be non-empty and rectangular (else InvalidDataError);
  the parent directory must exist. Minimal quoting, "\\n" after every row,
  UTF-8 without BOM. Cell formatting: None -> "", bool -> true/false,
  float -> repr(f), else str(v).

API:
- parse(text) / parse_trim(text) -> list of str rows
- read(path) / read_trim(path) -> list of str rows
- parse_typed(text) / parse_typed_trim(text) -> list of int|float|str rows
- read_typed(path) / read_typed_trim(path) -> list of int|float|str rows
- parse_with_options(text, options, typed=...) / read_with_options(path, ...)
- write(path, rows) -> None (overwrites path)

Python: 3.10+
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence, Union

from .errors import (
    CsvEncodingError,
    CsvError,
    CsvIoError,
    CsvParseError,
    EmptyDataError,
    ErrorKind,
    FieldCountMismatchError,
    InvalidDataError,
    WritePermissionError,
)
from .options import DEFAULT, TRIM_ALL, GridDialect, ParseOptions, TrimMode
from .reader import PathLike, Rows, Source, parse_rows, read_rows
from .values import Native, TypedValue, ValueKind, resolve, resolve_row, resolve_rows
from .writer import write_rows

__version__ = "0.1.0"

TypedRows = List[List[Native]]


# ----------------------------
# Host-value conversion
# ----------------------------

def _to_native(rows: Rows) -> TypedRows:
    return [[resolve(f).to_native() for f in row] for row in rows]


def _format_cell(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        return repr(v)
    return v if isinstance(v, str) else str(v)


def _format_rows(rows: Iterable[Sequence[Any]]) -> List[List[str]]:
    out: List[List[str]] = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes, bytearray)):
            raise InvalidDataError(f"Row at line {i + 1} is not a sequence of fields: {row!r}")
        out.append([_format_cell(v) for v in row])
    return out


# ----------------------------
# Readers
# ----------------------------

def parse_with_options(
    text: Source,
    options: ParseOptions = DEFAULT,
    *,
    typed: bool = False,
) -> Union[Rows, TypedRows]:
    rows = parse_rows(text, options)
    return _to_native(rows) if typed else rows


def read_with_options(
    path: PathLike,
    options: ParseOptions = DEFAULT,
    *,
    typed: bool = False,
) -> Union[Rows, TypedRows]:
    rows = read_rows(path, options)
    return _to_native(rows) if typed else rows


def parse(text: Source) -> Rows:
    return parse_rows(text, DEFAULT)


def parse_trim(text: Source) -> Rows:
    return parse_rows(text, TRIM_ALL)


def read(path: PathLike) -> Rows:
    return read_rows(path, DEFAULT)


def read_trim(path: PathLike) -> Rows:
    return read_rows(path, TRIM_ALL)


def parse_typed(text: Source) -> TypedRows:
    return _to_native(parse_rows(text, DEFAULT))


def parse_typed_trim(text: Source) -> TypedRows:
    return _to_native(parse_rows(text, TRIM_ALL))


def read_typed(path: PathLike) -> TypedRows:
    return _to_native(read_rows(path, DEFAULT))


def read_typed_trim(path: PathLike) -> TypedRows:
    return _to_native(read_rows(path, TRIM_ALL))


# ----------------------------
# Writer
# ----------------------------

def write(path: PathLike, rows: Iterable[Sequence[Any]]) -> None:
    write_rows(path, _format_rows(rows))


__all__ = [
    "__version__",
    "parse",
    "parse_trim",
    "read",
    "read_trim",
    "parse_typed",
    "parse_typed_trim",
    "read_typed",
    "read_typed_trim",
    "parse_with_options",
    "read_with_options",
    "write",
    "resolve",
    "resolve_row",
    "resolve_rows",
    "TypedValue",
    "ValueKind",
    "ParseOptions",
    "TrimMode",
    "GridDialect",
    "DEFAULT",
    "TRIM_ALL",
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
