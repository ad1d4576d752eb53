"""Value objects shared by the formatting services.

Everything here is immutable and rebuilt per call; the lookup tables are
module-level constants.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class NumberSystem(str, Enum):
    """Magnitude ladder family."""
    INTERNATIONAL = "international"
    INDIAN = "indian"


class FormatStyle(str, Enum):
    """Suffix rendering style."""
    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class LocaleConfiguration:
    decimal_separator: str
    thousand_separator: str
    number_system: NumberSystem


@dataclass(frozen=True)
class MagnitudeUnit:
    threshold: float
    suffix: str


# Descending by threshold; the first unit <= value wins.
INTERNATIONAL_UNITS: Tuple[MagnitudeUnit, ...] = (
    MagnitudeUnit(1e18, "E"),
    MagnitudeUnit(1e15, "P"),
    MagnitudeUnit(1e12, "T"),
    MagnitudeUnit(1e9, "B"),
    MagnitudeUnit(1e6, "M"),
    MagnitudeUnit(1e3, "k"),
)

INDIAN_UNITS: Tuple[MagnitudeUnit, ...] = (
    MagnitudeUnit(1e7, "Cr"),
    MagnitudeUnit(1e5, "L"),
    MagnitudeUnit(1e3, "K"),
)

LONG_SUFFIXES = MappingProxyType({
    "k": "thousand",
    "K": "thousand",
    "M": "million",
    "B": "billion",
    "T": "trillion",
    "P": "quadrillion",
    "E": "quintillion",
    "Cr": "crore",
    "L": "lakh",
})


class FormatOptions(BaseModel):
    """Per-call options for magnitude abbreviation.

    ``style`` is a plain string: only ``"long"`` is special, every
    other value renders the short suffix.
    """
    model_config = ConfigDict(frozen=True)

    format_type: Optional[str] = "en"
    precise: bool = False
    style: str = FormatStyle.SHORT.value

    @property
    def is_long(self) -> bool:
        return self.style == FormatStyle.LONG.value


class GroupOptions(BaseModel):
    """Per-call options for digit grouping."""
    model_config = ConfigDict(frozen=True)

    format_type: Optional[str] = "en"


__all__ = [
    "NumberSystem",
    "FormatStyle",
    "LocaleConfiguration",
    "MagnitudeUnit",
    "INTERNATIONAL_UNITS",
    "INDIAN_UNITS",
    "LONG_SUFFIXES",
    "FormatOptions",
    "GroupOptions",
]
