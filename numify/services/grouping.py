"""Locale digit grouping utilities.

Groups the integer part in threes from the right and swaps the decimal
separator. No abbreviation and no rounding: the fraction is whatever the
canonical rendering of the value contains.

Rules:
- Preserve sign
- Every locale, ``in`` included, groups in threes
- Pure string manipulation (avoid locale dependence)

Examples:
>>> format_grouped(1234567.89)
'1,234,567.89'
>>> format_grouped(1234567.89, GroupOptions(format_type="de"))
'1.234.567,89'
>>> format_grouped(-1234)
'-1,234'
"""
from __future__ import annotations

from typing import Optional
import re

from numify.models.format import GroupOptions
from numify.services.locale_registry import resolve
from numify.utils.number_text import Number, canonical_string, to_float

__all__ = ["group_digits", "format_grouped"]

_GROUP_BOUNDARY = re.compile(r"\B(?=(\d{3})+(?!\d))")


def _split_number_str(num_str: str) -> tuple[str, str]:
    if '.' in num_str:
        left, right = num_str.split('.', 1)
    else:
        left, right = num_str, ''
    return left, right


def group_digits(integer_part: str, separator: str) -> str:
    """Insert ``separator`` before every run of three digits ending the digit sequence."""
    return _GROUP_BOUNDARY.sub(lambda _m: separator, integer_part)


def format_grouped(value: Number, options: Optional[GroupOptions] = None) -> str:
    options = options or GroupOptions()
    config = resolve(options.format_type)
    left, right = _split_number_str(canonical_string(to_float(value)))
    grouped = group_digits(left, config.thousand_separator)
    return grouped + (config.decimal_separator + right if right else '')
