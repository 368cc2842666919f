from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from weather_export.domain.location import Location
from weather_export.domain.weather import (
    UV,
    AirQuality,
    Alert,
    AlertSeverity,
    Astro,
    Base,
    Current,
    Daily,
    DegreeDay,
    HalfDay,
    Hourly,
    Minutely,
    MoonPhase,
    Normals,
    Pollen,
    Precipitation,
    PrecipitationDuration,
    PrecipitationProbability,
    Temperature,
    Weather,
    Wind,
)
from weather_export.export.preferences import ExportPreferences

REFRESH = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture()
def metric_prefs() -> ExportPreferences:
    return ExportPreferences(
        temperature_unit="c",
        precipitation_unit="mm",
        distance_unit="km",
        pressure_unit="hpa",
        locale="en_US",
    )


@pytest.fixture()
def imperial_prefs() -> ExportPreferences:
    return ExportPreferences(
        temperature_unit="f",
        precipitation_unit="in",
        distance_unit="mi",
        pressure_unit="inhg",
        locale="en_US",
    )


def build_weather(**overrides) -> Weather:
    payload = {
        "base": Base(refresh_time=REFRESH),
        "current": Current(
            weather_text="Partly cloudy",
            weather_code="partly_cloudy",
            temperature=Temperature(temperature=15.0, apparent_temperature=13.5),
            wind=Wind(degree=225.0, speed=4.2, gusts=9.1),
            uv=UV(index=2.0),
            air_quality=AirQuality(pm25=11.0, pm10=21.0),
            relative_humidity=71.0,
            dew_point=7.2,
            pressure=1016.3,
            cloud_cover=45,
            visibility=14000.0,
            daily_forecast="Clouds increasing",
            hourly_forecast="Light breeze",
        ),
        "normals": Normals(month=3, daytime_temperature=12.9, nighttime_temperature=4.6),
        "daily_forecast": [
            Daily(
                date=datetime(2026, 3, 1, tzinfo=timezone.utc),
                day=HalfDay(
                    weather_text="Partly cloudy",
                    weather_phase="Morning clouds",
                    weather_code="partly_cloudy",
                    temperature=Temperature(temperature=14.0),
                    precipitation=Precipitation(total=0.4, rain=0.4),
                    precipitation_probability=PrecipitationProbability(total=20.0, rain=20.0),
                    precipitation_duration=PrecipitationDuration(total=0.5, rain=0.5),
                    wind=Wind(degree=230.0, speed=5.0),
                    cloud_cover=50,
                ),
                night=HalfDay(weather_code="clear", temperature=Temperature(temperature=5.0)),
                degree_day=DegreeDay(heating=8.0, cooling=0.0),
                sun=Astro(
                    rise_date=datetime(2026, 3, 1, 6, 35, tzinfo=timezone.utc),
                    set_date=datetime(2026, 3, 1, 17, 39, tzinfo=timezone.utc),
                ),
                moon_phase=MoonPhase(angle=137),
                air_quality=AirQuality(pm25=9.0),
                pollen=Pollen(alder=30, hazel=4, grass=0),
                uv=UV(index=3.0),
                sunshine_duration=6.5,
            )
        ],
        "hourly_forecast": [
            Hourly(
                date=datetime(2026, 3, 1, 11, tzinfo=timezone.utc),
                is_daylight=True,
                temperature=Temperature(temperature=12.9),
                precipitation=Precipitation(total=0.0),
                wind=Wind(degree=225.0, speed=4.4),
                relative_humidity=69.0,
                pressure=1016.0,
                cloud_cover=40,
                visibility=15000.0,
            )
        ],
        "minutely_forecast": [
            Minutely(date=REFRESH + timedelta(minutes=15 * i), minute_interval=15, precipitation_intensity=value)
            for i, value in enumerate([0.0, 0.0, 0.6, 1.1])
        ],
        "alert_list": [
            Alert(
                alert_id="wind-75",
                start_date=datetime(2026, 3, 1, 15, tzinfo=timezone.utc),
                end_date=datetime(2026, 3, 2, 5, tzinfo=timezone.utc),
                headline="Yellow wind warning",
                severity=AlertSeverity.MODERATE,
                color=0xFFFFC107,
            )
        ],
    }
    payload.update(overrides)
    return Weather(**payload)


def build_location(location_id: str = "paris", **overrides) -> Location:
    payload = {
        "id": location_id,
        "latitude": 48.8534,
        "longitude": 2.3488,
        "timezone": "Europe/Paris",
        "country": "France",
        "country_code": "FR",
        "city": "Paris",
        "weather": build_weather(),
    }
    payload.update(overrides)
    return Location(**payload)


@pytest.fixture()
def weather() -> Weather:
    return build_weather()


@pytest.fixture()
def location() -> Location:
    return build_location()


@pytest.fixture()
def make_weather():
    return build_weather


@pytest.fixture()
def make_location():
    return build_location
