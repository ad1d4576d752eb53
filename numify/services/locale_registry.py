"""Locale registry: maps a format type to separators and a number system.

``resolve`` is total. Unknown codes degrade to English instead of raising.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Optional, Tuple
import logging

from numify.models.format import (
    INDIAN_UNITS,
    INTERNATIONAL_UNITS,
    LocaleConfiguration,
    MagnitudeUnit,
    NumberSystem,
)

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

LOCALES = MappingProxyType({
    "en": LocaleConfiguration(".", ",", NumberSystem.INTERNATIONAL),
    "de": LocaleConfiguration(",", ".", NumberSystem.INTERNATIONAL),
    "fr": LocaleConfiguration(",", " ", NumberSystem.INTERNATIONAL),
    "es": LocaleConfiguration(",", ".", NumberSystem.INTERNATIONAL),
    "in": LocaleConfiguration(".", ",", NumberSystem.INDIAN),
    "it": LocaleConfiguration(",", ".", NumberSystem.INTERNATIONAL),
    "ch": LocaleConfiguration(".", "'", NumberSystem.INTERNATIONAL),
    "se": LocaleConfiguration(",", " ", NumberSystem.INTERNATIONAL),
})

SYSTEM_NAMES: Tuple[str, ...] = tuple(system.value for system in NumberSystem)

_LADDERS = MappingProxyType({
    NumberSystem.INTERNATIONAL: INTERNATIONAL_UNITS,
    NumberSystem.INDIAN: INDIAN_UNITS,
})


def resolve(format_type: Optional[str]) -> LocaleConfiguration:
    """Return the configuration for a locale code or bare system name."""
    if not format_type:
        return LOCALES[DEFAULT_LOCALE]
    if format_type in SYSTEM_NAMES:
        # Bare system names keep English separators.
        return LocaleConfiguration(".", ",", NumberSystem(format_type))
    config = LOCALES.get(format_type)
    if config is None:
        logger.debug("Unknown format type %r; falling back to %r", format_type, DEFAULT_LOCALE)
        return LOCALES[DEFAULT_LOCALE]
    return config


def ladder_for(config: LocaleConfiguration) -> Tuple[MagnitudeUnit, ...]:
    return _LADDERS[config.number_system]


def supported_format_types() -> Tuple[str, ...]:
    return tuple(LOCALES) + SYSTEM_NAMES


__all__ = [
    "DEFAULT_LOCALE",
    "LOCALES",
    "SYSTEM_NAMES",
    "resolve",
    "ladder_for",
    "supported_format_types",
]
