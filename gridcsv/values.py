"""
Typed value resolution: classify one field's text as integer, float or string.

Order (first match wins):
    ""                                   -> STRING
    [+-]?digits within signed 64-bit     -> INTEGER
    decimal/exponent literal, finite     -> FLOAT
    anything else                        -> STRING (text unchanged)

Integer literals outside the 64-bit range fall through to the float rule.
NaN/Infinity spellings never match the float form, and literals that
overflow to infinity are kept as strings.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

Native = Union[int, float, str]

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
_I64_DIGITS = len(str(I64_MAX))

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ValueKind(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True)
class TypedValue:
    kind: ValueKind
    value: Native

    def to_native(self) -> Native:
        return self.value


def _as_integer(field: str) -> Optional[int]:
    if _INTEGER_RE.fullmatch(field) is None:
        return None
    # int() refuses very long digit strings, so convert without the zero padding
    digits = field.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _I64_DIGITS:
        return None
    number = -int(digits) if field.startswith("-") else int(digits)
    if I64_MIN <= number <= I64_MAX:
        return number
    return None


def _as_float(field: str) -> Optional[float]:
    if _FLOAT_RE.fullmatch(field) is None:
        return None
    real = float(field)
    if not math.isfinite(real):
        return None
    return real


def resolve(field: str) -> TypedValue:
    """Classify `field`. Total: unparseable text is returned as STRING."""
    if field == "":
        return TypedValue(ValueKind.STRING, "")

    number = _as_integer(field)
    if number is not None:
        return TypedValue(ValueKind.INTEGER, number)

    real = _as_float(field)
    if real is not None:
        return TypedValue(ValueKind.FLOAT, real)

    return TypedValue(ValueKind.STRING, field)


def resolve_row(row: Sequence[str]) -> List[TypedValue]:
    return [resolve(f) for f in row]


def resolve_rows(rows: Sequence[Sequence[str]]) -> List[List[TypedValue]]:
    return [resolve_row(r) for r in rows]


__all__ = [
    "ValueKind",
    "TypedValue",
    "resolve",
    "resolve_row",
    "resolve_rows",
    "I64_MIN",
    "I64_MAX",
]
