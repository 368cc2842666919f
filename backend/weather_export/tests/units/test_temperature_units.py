from __future__ import annotations

import pytest

from weather_export.units.base import UnknownUnitError
from weather_export.units.temperature import TEMPERATURE


def test_convert_to_fahrenheit_and_kelvin():
    assert TEMPERATURE.convert(15.0, "c") == 15.0
    assert TEMPERATURE.convert(15.0, "f") == pytest.approx(59.0)
    assert TEMPERATURE.convert(-40.0, "f") == pytest.approx(-40.0)
    assert TEMPERATURE.convert(0.0, "k") == pytest.approx(273.15)


def test_degree_day_conversion_has_no_offset():
    assert TEMPERATURE.convert_degree_day(10.0, "c") == 10.0
    assert TEMPERATURE.convert_degree_day(10.0, "f") == pytest.approx(18.0)
    assert TEMPERATURE.convert_degree_day(10.0, "k") == 10.0
    # the plain conversion would add the zero-point offset
    assert TEMPERATURE.convert(10.0, "f") != TEMPERATURE.convert_degree_day(10.0, "f")


@pytest.mark.parametrize("unit", ["c", "f", "k"])
def test_revert_round_trip(unit):
    for value in (-30.5, 0.0, 15.0, 42.2):
        assert TEMPERATURE.revert(TEMPERATURE.convert(value, unit), unit) == pytest.approx(value)


def test_format_and_format_short():
    assert TEMPERATURE.format("en_US", 15.0, "f", 0) == "59°F"
    assert TEMPERATURE.format_short("en_US", 15.0, "f", 0) == "59°"
    assert TEMPERATURE.format("en_US", 12.4, "c", 0) == "12°C"
    assert TEMPERATURE.format("en_US", 12.4, "c") == "12.4°C"
    assert TEMPERATURE.format("en_US", 15.0, "k", 0) == "288K"
    assert TEMPERATURE.format_short("en_US", 15.0, "k", 0) == "288K"


def test_format_uses_locale_decimal_separator():
    assert TEMPERATURE.format("de_DE", 12.4, "c", 1) == "12,4°C"


def test_unknown_unit_fails_loudly():
    with pytest.raises(UnknownUnitError):
        TEMPERATURE.convert(10.0, "rankine")
    with pytest.raises(UnknownUnitError):
        TEMPERATURE.convert_degree_day(10.0, "rankine")
    with pytest.raises(ValueError):
        TEMPERATURE.format("en_US", 10.0, "rankine")
