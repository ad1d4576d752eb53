"""Magnitude abbreviation (``1234567 -> "1.23M"``).

Steps:
 1. Sanitize: canonical text of the value minus anything but digits and dots.
    Negative values therefore lose their sign.
 2. Values below 1000 are returned unabbreviated (two decimals when precise).
 3. Otherwise the largest unit of the locale's ladder not exceeding the value
    scales it; the two-decimal rendering is trimmed of trailing zeros.
 4. Short style glues the suffix on, long style appends " <word>".
"""
from __future__ import annotations

from typing import Iterable, Optional
import logging

from numify.models.format import LONG_SUFFIXES, FormatOptions, MagnitudeUnit
from numify.services.locale_registry import ladder_for, resolve
from numify.utils.number_text import Number, canonical_string, fixed_two, sanitize, to_float, trim_zeros

logger = logging.getLogger(__name__)

SMALLEST_THRESHOLD = 1000


def select_unit(value: float, ladder: Iterable[MagnitudeUnit]) -> Optional[MagnitudeUnit]:
    """Return the first (largest) unit whose threshold is <= value."""
    for unit in ladder:
        if value >= unit.threshold:
            return unit
    return None


def format_magnitude(value: Number, options: Optional[FormatOptions] = None) -> str:
    options = options or FormatOptions()
    num = sanitize(to_float(value))
    config = resolve(options.format_type)

    if num < SMALLEST_THRESHOLD:
        if options.precise:
            return fixed_two(num).replace(".", config.decimal_separator)
        return canonical_string(num)

    unit = select_unit(num, ladder_for(config))
    if unit is None:
        logger.debug("No magnitude unit for %r; returning plain value", num)
        return canonical_string(num)

    rendered = trim_zeros(fixed_two(num / unit.threshold)).replace(".", config.decimal_separator)
    if options.is_long:
        return f"{rendered} {LONG_SUFFIXES[unit.suffix]}"
    return rendered + unit.suffix


__all__ = ["SMALLEST_THRESHOLD", "select_unit", "format_magnitude"]
