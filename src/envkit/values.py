"""
Scalar coercion for resolved dotenv values.

A resolved string becomes an Integer, Float, Boolean or String. Numbers are
recognised with an explicit ASCII grammar, so parsing never depends on the
locale or on Python's more permissive ``int()``/``float()`` literals
(underscores, ``inf``, ``nan``, surrounding whitespace).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

#: Scalar types a resolved value can hold
Scalar = str | int | float | bool

#: Integers with more digits than this stay strings
MAX_INTEGER_DIGITS = 64

_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ValueType(str, Enum):
    """Tag of a resolved dotenv value."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ResolvedValue:
    """A coerced scalar together with its type tag."""

    type: ValueType
    value: Scalar

    def __str__(self) -> str:
        return render_scalar(self.value)


def is_number(text: str) -> bool:
    """Return True if text is a plain decimal number literal."""
    return _NUMBER_RE.fullmatch(text) is not None


def coerce(text: str) -> ResolvedValue:
    """
    Convert a fully resolved string into a typed scalar.

    Numbers containing a ``.`` become floats, other numbers integers
    (``1e3`` is the integer 1000). Exponent forms that are not whole
    (``1e-5``) or too large (``1e5000``), and floats that overflow, stay
    strings rather than losing precision. Exactly ``true``/``false`` become
    booleans. Anything else, including ``34,3``, stays a string.
    """
    if is_number(text):
        number = _parse_number(text)
        if number is not None:
            return number
    if text == "true":
        return ResolvedValue(ValueType.BOOLEAN, True)
    if text == "false":
        return ResolvedValue(ValueType.BOOLEAN, False)
    return ResolvedValue(ValueType.STRING, text)


def _parse_number(text: str) -> ResolvedValue | None:
    """Parse a number literal, or None when it has no exact scalar form."""
    if "." in text:
        value = float(text)
        if not math.isfinite(value):
            return None
        return ResolvedValue(ValueType.FLOAT, value)

    number = Decimal(text)
    if number.adjusted() >= MAX_INTEGER_DIGITS or number != number.to_integral_value():
        return None
    return ResolvedValue(ValueType.INTEGER, int(number))


def type_of(value: Scalar) -> ValueType:
    """Return the tag for a scalar already held by a store."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, int):
        return ValueType.INTEGER
    if isinstance(value, float):
        return ValueType.FLOAT
    return ValueType.STRING


def render_scalar(value: Scalar) -> str:
    """String form used for interpolation and for the ambient environment."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)
