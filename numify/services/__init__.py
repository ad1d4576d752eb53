"""Formatting services: locale lookup, magnitude abbreviation, digit grouping."""

__all__ = [
    "locale_registry",
    "magnitude",
    "grouping",
]
