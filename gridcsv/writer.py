"""
Writer: validate a rectangular grid of strings, then serialize it to a file.

Validation runs before the destination is touched. The destination is
opened (and truncated) directly, so a failure while writing rows can leave
a partial file behind.
"""

from __future__ import annotations

import csv
import io
import logging
import os
from pathlib import Path
from typing import Sequence, Union

from .errors import (
    EMPTY_DATA_MESSAGE,
    CsvIoError,
    CsvParseError,
    InvalidDataError,
    WritePermissionError,
)
from .options import GridDialect

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# Serializing with "\r\n" makes QUOTE_MINIMAL quote fields holding either
# character; the terminator is then swapped for GridDialect's "\n".
_WIRE_TERMINATOR = "\r\n"


def format_row(row: Sequence[str]) -> str:
    """Serialize one row to a "\\n"-terminated CSV line."""
    buffer = io.StringIO()
    csv.writer(buffer, dialect=GridDialect, lineterminator=_WIRE_TERMINATOR).writerow(row)
    return buffer.getvalue()[: -len(_WIRE_TERMINATOR)] + GridDialect.lineterminator


def validate_rows(rows: Sequence[Sequence[str]]) -> None:
    """Raise InvalidDataError unless `rows` is non-empty and rectangular."""
    if len(rows) == 0:
        raise InvalidDataError(EMPTY_DATA_MESSAGE)

    if len(rows) > 1:
        expected = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != expected:
                raise InvalidDataError.field_count(line=i + 1, expected=expected, actual=len(row))


def write_rows(path: PathLike, rows: Sequence[Sequence[str]]) -> None:
    """
    Write `rows` to `path`, replacing any existing file.

    Raises InvalidDataError for empty or ragged input, CsvIoError when the
    parent directory is missing or writing/flushing fails, and
    WritePermissionError when the file cannot be created for lack of
    permission.
    """
    validate_rows(rows)

    name = os.fspath(path)
    target = Path(path)
    parent = target.parent
    if not parent.exists():
        raise CsvIoError(f"Parent directory does not exist: {parent}")

    try:
        handle = target.open("w", encoding="utf-8", newline="")
    except PermissionError as e:
        raise WritePermissionError(f"Permission denied: {name}") from e
    except OSError as e:
        raise CsvIoError(f"Failed to create file '{name}': {e}") from e

    with handle:
        try:
            for row in rows:
                handle.write(format_row(row))
        except csv.Error as e:
            raise CsvParseError(f"Failed to serialize rows for '{name}': {e}") from e
        except OSError as e:
            raise CsvIoError(f"Failed to write file '{name}': {e}") from e

        try:
            handle.flush()
        except OSError as e:
            raise CsvIoError(f"Failed to flush data to file '{name}': {e}") from e

    logger.debug("Wrote %d rows to %s", len(rows), name)


__all__ = [
    "format_row",
    "validate_rows",
    "write_rows",
]
