from __future__ import annotations

import pytest

from weather_export.units.base import UnitDefinition, UnitFamily, UnknownUnitError, number_pattern
from weather_export.units.distance import DISTANCE
from weather_export.units.duration import DURATION
from weather_export.units.precipitation import PRECIPITATION
from weather_export.units.pressure import PRESSURE
from weather_export.units.speed import SPEED, SPEED_FOR_DISTANCE

FAMILIES = [PRECIPITATION, DISTANCE, SPEED, PRESSURE, DURATION]


def test_canonical_units():
    assert PRECIPITATION.canonical == "mm"
    assert DISTANCE.canonical == "m"
    assert SPEED.canonical == "m/s"
    assert PRESSURE.canonical == "mb"
    assert DURATION.canonical == "h"


@pytest.mark.parametrize("family", FAMILIES, ids=lambda f: f.kind)
def test_every_unit_round_trips(family):
    for unit_id in family.ids():
        for value in (0.0, 0.4, 17.25, 1016.3):
            assert family.revert(family.convert(value, unit_id), unit_id) == pytest.approx(value)


def test_known_conversion_factors():
    assert PRECIPITATION.convert(25.4, "in") == pytest.approx(1.0)
    assert PRECIPITATION.convert(12.0, "cm") == pytest.approx(1.2)
    assert DISTANCE.convert(1609.344, "mi") == pytest.approx(1.0)
    assert DISTANCE.convert(1852.0, "nmi") == pytest.approx(1.0)
    assert SPEED.convert(10.0, "kph") == pytest.approx(36.0)
    assert SPEED.convert(1852 / 3600, "kn") == pytest.approx(1.0)
    assert PRESSURE.convert(1013.25, "atm") == pytest.approx(1.0)
    assert PRESSURE.convert(1000.0, "kpa") == pytest.approx(100.0)


def test_formatting_respects_unit_decimals():
    assert PRECIPITATION.format("en_US", 0.4, "mm") == "0.4 mm"
    assert PRECIPITATION.format_short("en_US", 0.4, "mm") == "0.4mm"
    assert PRECIPITATION.format("en_US", 0.4, "in") == "0.02 in"
    assert DISTANCE.format("en_US", 14000.0, "km") == "14 km"
    assert DISTANCE.format("en_US", 14000.0, "m") == "14,000 m"
    assert SPEED.format("en_US", 4.2, "kph") == "15.1 km/h"
    assert PRESSURE.format("en_US", 1016.3, "hpa") == "1,016.3 hPa"
    assert DURATION.format("en_US", 6.5, "h") == "6.5 h"


def test_precision_override():
    assert PRESSURE.format("en_US", 1016.3, "mb", 0) == "1,016 mb"


def test_speed_counterpart_for_every_distance_unit():
    assert set(SPEED_FOR_DISTANCE) == set(DISTANCE.ids())
    assert set(SPEED_FOR_DISTANCE.values()) == set(SPEED.ids())


def test_family_rejects_duplicate_units():
    unit = UnitDefinition(id="x", symbol="x", decimals=0, convert=float, revert=float)
    with pytest.raises(ValueError):
        UnitFamily("demo", "x", [unit, unit])


def test_unknown_unit_names_family():
    with pytest.raises(UnknownUnitError, match="pressure"):
        PRESSURE.get("bar")


def test_number_pattern():
    assert number_pattern(0) == "#,##0"
    assert number_pattern(2) == "#,##0.##"
