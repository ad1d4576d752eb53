"""Formatting value objects."""

from .format import (
    FormatOptions,
    FormatStyle,
    GroupOptions,
    LocaleConfiguration,
    MagnitudeUnit,
    NumberSystem,
)

__all__ = [
    "FormatOptions",
    "FormatStyle",
    "GroupOptions",
    "LocaleConfiguration",
    "MagnitudeUnit",
    "NumberSystem",
]
