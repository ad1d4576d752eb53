"""Locale-aware compact number formatting.

>>> numify(1234)
'1.23k'
>>> numify(12345678, format_type="in")
'1.23Cr'
>>> numify(1234567, style="long")
'1.23 million'
>>> format_number(1234567.89, format_type="ch")
"1'234'567.89"
"""
from __future__ import annotations

from typing import Optional

from .models.format import (
    FormatOptions,
    FormatStyle,
    GroupOptions,
    LocaleConfiguration,
    MagnitudeUnit,
    NumberSystem,
)
from .services.grouping import format_grouped
from .services.locale_registry import resolve as resolve_format, supported_format_types
from .services.magnitude import format_magnitude
from .utils.errors import DomainError, InvalidNumber
from .utils.number_text import Number

__version__ = "1.0.0"


def numify(
    value: Number,
    format_type: Optional[str] = "en",
    precise: bool = False,
    style: str = "short",
) -> str:
    """Abbreviate ``value`` with a magnitude suffix (``1000 -> "1k"``).

    ``precise`` only affects values below 1000, which are then rendered with
    two decimals. Negative values lose their sign.
    """
    return format_magnitude(value, FormatOptions(format_type=format_type, precise=precise, style=style))


def format_number(value: Number, format_type: Optional[str] = "en") -> str:
    """Group digits with the locale's separators (``1234567.89 -> "1,234,567.89"``)."""
    return format_grouped(value, GroupOptions(format_type=format_type))


__all__ = [
    "numify",
    "format_number",
    "resolve_format",
    "supported_format_types",
    "FormatOptions",
    "FormatStyle",
    "GroupOptions",
    "LocaleConfiguration",
    "MagnitudeUnit",
    "NumberSystem",
    "DomainError",
    "InvalidNumber",
    "__version__",
]
