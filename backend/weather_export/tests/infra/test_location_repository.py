from __future__ import annotations

import json
from datetime import timezone

import pytest

from weather_export.config import DEFAULT_LOCATIONS_FILE
from weather_export.domain.weather import AlertSeverity
from weather_export.infra.location_repository import InMemoryLocationRepository, JsonLocationRepository


def test_sample_file_loads():
    locations = JsonLocationRepository(DEFAULT_LOCATIONS_FILE).get_all_locations()
    assert [loc.id for loc in locations] == ["2988507", "1850147", "5128581"]

    paris = locations[0]
    assert paris.admin1 == "Île-de-France"
    weather = paris.weather
    assert weather.current.temperature.temperature == 12.4
    assert weather.current.air_quality.no2 == 18.5
    assert weather.daily_forecast[0].pollen.alder == 30
    assert weather.daily_forecast[0].moon_phase.angle == 137
    assert weather.daily_forecast[0].sun.rise_date.utcoffset().total_seconds() == 3600
    assert len(weather.minutely_forecast) == 4
    assert weather.alert_list[0].severity == AlertSeverity.MODERATE
    assert weather.base.refresh_time.tzinfo == timezone.utc

    assert locations[1].weather.current is None
    assert locations[2].weather is None


def test_wrapped_document(tmp_path):
    path = tmp_path / "locations.json"
    path.write_text(
        json.dumps({"locations": [{"id": "a", "latitude": 1.0, "longitude": 2.0, "timezone": "UTC"}]}),
        encoding="utf-8",
    )
    (location,) = JsonLocationRepository(path).get_all_locations()
    assert location.id == "a"
    assert location.weather is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonLocationRepository(tmp_path / "missing.json").get_all_locations()


def test_in_memory_repository(make_location):
    repository = InMemoryLocationRepository()
    repository.add(make_location("a"))
    repository.add(make_location("b"))
    assert [loc.id for loc in repository.get_all_locations(with_parameters=True)] == ["a", "b"]
