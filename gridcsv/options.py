"""Parse options and the fixed CSV dialect shared by reader and writer."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from enum import Enum
from typing import Union


# ----------------------------
# Dialect
# ----------------------------

class GridDialect(csv.Dialect):
    """Comma-delimited, double-quote escaped, one row per "\\n"-terminated line."""

    delimiter = ","
    quotechar = '"'
    doublequote = True
    skipinitialspace = False
    lineterminator = "\n"
    quoting = csv.QUOTE_MINIMAL
    strict = False


# ----------------------------
# Parse options
# ----------------------------

class TrimMode(Enum):
    NONE = "none"
    ALL = "all"


@dataclass(frozen=True)
class ParseOptions:
    """
    Options for one parse call.

    `trim` accepts a TrimMode or a plain bool (True -> ALL, False -> NONE).
    """

    trim: Union[TrimMode, bool] = TrimMode.NONE

    def __post_init__(self) -> None:
        if isinstance(self.trim, bool):
            object.__setattr__(self, "trim", TrimMode.ALL if self.trim else TrimMode.NONE)
        elif not isinstance(self.trim, TrimMode):
            raise TypeError(f"trim must be a TrimMode or bool, not {type(self.trim).__name__}")

    @property
    def trims(self) -> bool:
        return self.trim is TrimMode.ALL


DEFAULT = ParseOptions()
TRIM_ALL = ParseOptions(trim=TrimMode.ALL)


__all__ = [
    "GridDialect",
    "TrimMode",
    "ParseOptions",
    "DEFAULT",
    "TRIM_ALL",
]
