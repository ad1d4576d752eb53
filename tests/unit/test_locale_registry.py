import pytest

from numify.models.format import INDIAN_UNITS, INTERNATIONAL_UNITS, LocaleConfiguration, NumberSystem
from numify.services.locale_registry import LOCALES, ladder_for, resolve, supported_format_types

pytestmark = pytest.mark.unit

ENGLISH = LocaleConfiguration('.', ',', NumberSystem.INTERNATIONAL)


def test_locale_table():
    cases = [
        ('en', '.', ',', NumberSystem.INTERNATIONAL),
        ('de', ',', '.', NumberSystem.INTERNATIONAL),
        ('fr', ',', ' ', NumberSystem.INTERNATIONAL),
        ('es', ',', '.', NumberSystem.INTERNATIONAL),
        ('in', '.', ',', NumberSystem.INDIAN),
        ('it', ',', '.', NumberSystem.INTERNATIONAL),
        ('ch', '.', "'", NumberSystem.INTERNATIONAL),
        ('se', ',', ' ', NumberSystem.INTERNATIONAL),
    ]
    for code, decimal, thousand, system in cases:
        assert resolve(code) == LocaleConfiguration(decimal, thousand, system)


def test_bare_system_names_use_english_separators():
    assert resolve('indian') == LocaleConfiguration('.', ',', NumberSystem.INDIAN)
    assert resolve('international') == ENGLISH


def test_missing_or_unknown_falls_back_to_english():
    for format_type in (None, '', 'xx', 'EN', 'Indian'):
        assert resolve(format_type) == ENGLISH


def test_ladder_follows_number_system_only():
    assert ladder_for(resolve('in')) is INDIAN_UNITS
    assert ladder_for(resolve('de')) is INTERNATIONAL_UNITS
    assert ladder_for(resolve('indian')) is INDIAN_UNITS


def test_supported_format_types():
    assert supported_format_types() == (
        'en', 'de', 'fr', 'es', 'in', 'it', 'ch', 'se', 'international', 'indian',
    )


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        LOCALES['xx'] = ENGLISH  # type: ignore[index]
