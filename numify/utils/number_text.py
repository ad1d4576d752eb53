"""Number <-> text helpers used by both formatters.

Rules:
- Canonical rendering follows ECMAScript ``Number#toString``: integral values
  below 1e21 print without a fraction, exponent notation is used only below
  1e-6 or from 1e21 upwards, and the exponent carries no zero padding.
- Two-decimal rendering rounds HALF_UP on the exact binary value.
- Pure string manipulation (no ``locale`` module).

Examples:
>>> canonical_string(1000000.0)
'1000000'
>>> canonical_string(1e21)
'1e+21'
>>> canonical_string(0.000001)
'0.000001'
>>> sanitize(-1234.5)
1234.5
>>> fixed_two(1.234)
'1.23'
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
import math
import re
from typing import Any, Union

from .errors import InvalidNumber

Number = Union[int, float, Decimal]

__all__ = ["Number", "to_float", "canonical_string", "sanitize", "fixed_two", "trim_zeros"]

_NON_NUMERIC = re.compile(r"[^0-9.]")
_TRAILING_ZEROS = re.compile(r"\.0+$|(\.[0-9]*[1-9])0+$")
_TWO_PLACES = Decimal("0.01")
_EXACT_INTEGER_LIMIT = 2 ** 53


def to_float(value: Any) -> float:
    """Coerce a real number (int, float, Decimal) to float or raise InvalidNumber."""
    if isinstance(value, Decimal) and value.is_snan():
        return math.nan
    if isinstance(value, (Real, Decimal)):
        return float(value)
    raise InvalidNumber(value)


def canonical_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _EXACT_INTEGER_LIMIT:
        return str(int(value))
    if value.is_integer() and abs(value) < 1e21:
        # Shortest round-trip digits, zero padded
        return format(Decimal(repr(value)).to_integral_value(), "f")
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def sanitize(value: float) -> float:
    """Drop every character but digits and dots from the canonical text and re-parse.

    Signs, exponent markers and NaN/Infinity spellings disappear; an empty
    remainder parses as zero.
    """
    cleaned = _NON_NUMERIC.sub("", canonical_string(value))
    return float(cleaned) if cleaned else 0.0


def fixed_two(value: float) -> str:
    return format(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP), "f")


def trim_zeros(text: str) -> str:
    """Strip a trailing ``.00`` or a zero following a nonzero decimal digit."""
    return _TRAILING_ZEROS.sub(r"\1", text)
