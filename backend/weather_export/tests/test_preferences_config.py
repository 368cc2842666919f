from __future__ import annotations

from pathlib import Path

import pytest

from weather_export.config import DEFAULT_LOCATIONS_FILE, load_preferences, locations_file
from weather_export.export.preferences import ExportPreferences
from weather_export.units.base import UnknownUnitError


def test_defaults_without_environment():
    prefs = load_preferences({})
    assert prefs == ExportPreferences()
    assert prefs.temperature_unit == "c"
    assert prefs.pressure_unit == "mb"
    assert prefs.speed_unit == "kph"
    assert prefs.locale == "en_US"


def test_environment_overrides():
    prefs = load_preferences(
        {
            "BREEZY_TEMPERATURE_UNIT": "f",
            "BREEZY_PRECIPITATION_UNIT": "in",
            "BREEZY_DISTANCE_UNIT": "mi",
            "BREEZY_PRESSURE_UNIT": "inhg",
            "BREEZY_LOCALE": "en_GB",
        }
    )
    assert prefs.temperature_unit == "f"
    assert prefs.speed_unit == "mph"
    assert prefs.locale == "en_GB"


def test_explicit_speed_unit_wins():
    prefs = load_preferences({"BREEZY_DISTANCE_UNIT": "km", "BREEZY_SPEED_UNIT": "kn"})
    assert prefs.speed_unit == "kn"


@pytest.mark.parametrize(
    "key,value",
    [
        ("BREEZY_TEMPERATURE_UNIT", "rankine"),
        ("BREEZY_PRECIPITATION_UNIT", "gallon"),
        ("BREEZY_DISTANCE_UNIT", "league"),
        ("BREEZY_SPEED_UNIT", "mach"),
    ],
)
def test_unknown_units_are_rejected(key, value):
    with pytest.raises(UnknownUnitError):
        load_preferences({key: value})


def test_locations_file_setting(tmp_path):
    assert locations_file({}) == DEFAULT_LOCATIONS_FILE
    custom = tmp_path / "locations.json"
    assert locations_file({"BREEZY_LOCATIONS_FILE": str(custom)}) == Path(custom)
