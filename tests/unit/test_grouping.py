import pytest

from numify import format_number
from numify.models.format import GroupOptions
from numify.services.grouping import format_grouped, group_digits

pytestmark = pytest.mark.unit


def test_group_basic_english():
    cases = [
        (0, '0'),
        (12, '12'),
        (123, '123'),
        (1234, '1,234'),
        (12345, '12,345'),
        (123456, '123,456'),
        (1234567, '1,234,567'),
        (1_000_000, '1,000,000'),
    ]
    for value, expected in cases:
        assert format_number(value) == expected


def test_group_locales():
    cases = [
        ('en', '1,234,567.89'),
        ('de', '1.234.567,89'),
        ('fr', '1 234 567,89'),
        ('es', '1.234.567,89'),
        ('in', '1,234,567.89'),
        ('it', '1.234.567,89'),
        ('ch', "1'234'567.89"),
        ('se', '1 234 567,89'),
        ('indian', '1,234,567.89'),
        ('xx', '1,234,567.89'),
    ]
    for code, expected in cases:
        assert format_number(1234567.89, format_type=code) == expected


def test_group_negative_and_fraction():
    assert format_number(-1234567) == '-1,234,567'
    assert format_number(-1234.5, format_type='de') == '-1.234,5'
    assert format_number(0.5, format_type='fr') == '0,5'


def test_group_integral_float_has_no_fraction():
    assert format_number(1234.0) == '1,234'


def test_group_exponent_rendering_untouched():
    assert format_number(1e21) == '1e+21'


def test_group_idempotent_on_integers():
    first = format_number(9876543210)
    assert format_number(int(first.replace(',', ''))) == first


def test_group_digits_helper():
    assert group_digits('1234567', "'") == "1'234'567"
    assert group_digits('-1234', ' ') == '-1 234'
    assert group_digits('12', '.') == '12'


def test_format_grouped_default_options():
    assert format_grouped(1234.5) == '1,234.5'
    assert format_grouped(1234.5, GroupOptions(format_type='ch')) == "1'234.5"


def test_group_large_integers_use_shortest_digits():
    assert format_number(12345678901234567890) == '12,345,678,901,234,567,000'
    assert format_number(2 ** 60) == '1,152,921,504,606,847,000'
    assert format_number(2 ** 60, format_type='ch') == "1'152'921'504'606'847'000"
