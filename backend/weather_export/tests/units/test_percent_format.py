from __future__ import annotations

import pytest
from babel.numbers import format_percent as babel_format_percent

from weather_export.units.percent import format_percent


@pytest.mark.parametrize("locale", ["en_US", "fr_FR", "de_DE", "ar_EG", "ja_JP"])
def test_bounds_match_locale_formatter(locale):
    assert format_percent(locale, 0) == babel_format_percent(0, locale=locale)
    assert format_percent(locale, 100) == babel_format_percent(1, locale=locale)


def test_value_is_divided_by_hundred():
    assert format_percent("en_US", 71.0) == "71%"
    assert format_percent("en_US", 5.0) == "5%"


def test_fraction_digits():
    assert format_percent("en_US", 71.46) == "71%"
    assert format_percent("en_US", 71.46, digits=1) == "71.5%"
    assert format_percent("en_US", 71.0, digits=2) == "71%"
