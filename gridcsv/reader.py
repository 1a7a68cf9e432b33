"""
Raw reader: tokenize comma-delimited text into rows of string fields.

No header row is recognised; every record comes back as data. Blank lines
between records are skipped. Every record must have the width of the first.
"""

from __future__ import annotations

import csv
import io
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from .errors import (
    CsvEncodingError,
    CsvIoError,
    CsvParseError,
    EmptyDataError,
    FieldCountMismatchError,
)
from .options import DEFAULT, GridDialect, ParseOptions

logger = logging.getLogger(__name__)

Row = List[str]
Rows = List[Row]
Source = Union[str, bytes, bytearray]
PathLike = Union[str, "os.PathLike[str]"]

# ASCII whitespace without vertical tab
_ASCII_WHITESPACE = " \t\n\r\x0c"


# ----------------------------
# Decoding
# ----------------------------

def _decode(data: Union[bytes, bytearray], *, source: str) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise CsvEncodingError(
            f"Invalid UTF-8 in {source} at byte {e.start}: {e.reason}"
        ) from e


def _ensure_text(text: Source, *, source: str) -> str:
    if isinstance(text, (bytes, bytearray)):
        return _decode(text, source=source)
    if not isinstance(text, str):
        raise TypeError(f"CSV input must be str or bytes, not {type(text).__name__}")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CsvEncodingError(
            f"Input is not encodable as UTF-8 at position {e.start}: {e.reason}"
        ) from e
    return text


# ----------------------------
# Parsing
# ----------------------------

def parse_rows(text: Source, options: ParseOptions = DEFAULT, *, source: str = "input") -> Rows:
    """
    Parse CSV text into a list of rows of strings.

    Raises EmptyDataError for empty/whitespace-only input (or input that
    yields no records), FieldCountMismatchError when a record's width differs
    from the first record's, CsvParseError when the tokenizer fails and
    CsvEncodingError for input that is not valid UTF-8.
    """
    text = _ensure_text(text, source=source)
    if not text.strip():
        raise EmptyDataError()

    trim = options.trims
    records: Rows = []
    expected: Optional[int] = None

    # field_size_limit is process-wide; it is only ever raised, never lowered
    csv.field_size_limit(max(csv.field_size_limit(), len(text) + 1))
    tokens = csv.reader(io.StringIO(text, newline=""), dialect=GridDialect)
    try:
        for record in tokens:
            if not record:
                continue
            line = len(records) + 1
            if expected is None:
                expected = len(record)
            elif len(record) != expected:
                raise FieldCountMismatchError(line=line, expected=expected, actual=len(record))
            if trim:
                record = [f.strip(_ASCII_WHITESPACE) for f in record]
            records.append(record)
    except csv.Error as e:
        raise CsvParseError(f"{e} (line {tokens.line_num} of {source})") from e

    if not records:
        raise EmptyDataError()

    logger.debug("Parsed %d rows of %d fields from %s", len(records), expected, source)
    return records


def read_rows(path: PathLike, options: ParseOptions = DEFAULT) -> Rows:
    """Read a whole file into memory and parse it with parse_rows()."""
    name = os.fspath(path)
    p = Path(path)
    if not p.exists():
        raise CsvIoError(f"File not found: {name}")
    if not p.is_file():
        raise CsvIoError(f"Path is not a file: {name}")

    try:
        data = p.read_bytes()
    except OSError as e:
        raise CsvIoError(f"Failed to read file '{name}': {e}") from e

    logger.debug("Read %d bytes from %s", len(data), name)
    return parse_rows(data, options, source=name)


__all__ = [
    "Row",
    "Rows",
    "parse_rows",
    "read_rows",
]
