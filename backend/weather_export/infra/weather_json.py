from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Optional, TypeVar

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

T = TypeVar("T")


def _date(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _nested(item: Dict[str, Any], key: str, build: Callable[[Dict[str, Any]], T]) -> Optional[T]:
    value = item.get(key)
    return build(value) if value is not None else None


def _flat(cls: Callable[..., T]) -> Callable[[Dict[str, Any]], T]:
    # Records whose fields are plain numbers
    return lambda item: cls(**item)


def _astro(item: Dict[str, Any]) -> Astro:
    return Astro(rise_date=_date(item.get("rise_date")), set_date=_date(item.get("set_date")))


def _current(item: Dict[str, Any]) -> Current:
    return Current(
        weather_text=item.get("weather_text"),
        weather_code=item.get("weather_code"),
        temperature=_nested(item, "temperature", _flat(Temperature)),
        wind=_nested(item, "wind", _flat(Wind)),
        uv=_nested(item, "uv", _flat(UV)),
        air_quality=_nested(item, "air_quality", _flat(AirQuality)),
        relative_humidity=item.get("relative_humidity"),
        dew_point=item.get("dew_point"),
        pressure=item.get("pressure"),
        cloud_cover=item.get("cloud_cover"),
        visibility=item.get("visibility"),
        ceiling=item.get("ceiling"),
        daily_forecast=item.get("daily_forecast"),
        hourly_forecast=item.get("hourly_forecast"),
    )


def _half_day(item: Dict[str, Any]) -> HalfDay:
    return HalfDay(
        weather_text=item.get("weather_text"),
        weather_phase=item.get("weather_phase"),
        weather_code=item.get("weather_code"),
        temperature=_nested(item, "temperature", _flat(Temperature)),
        precipitation=_nested(item, "precipitation", _flat(Precipitation)),
        precipitation_probability=_nested(item, "precipitation_probability", _flat(PrecipitationProbability)),
        precipitation_duration=_nested(item, "precipitation_duration", _flat(PrecipitationDuration)),
        wind=_nested(item, "wind", _flat(Wind)),
        cloud_cover=item.get("cloud_cover"),
    )


def _daily(item: Dict[str, Any]) -> Daily:
    return Daily(
        date=datetime.fromisoformat(item["date"]),
        day=_nested(item, "day", _half_day),
        night=_nested(item, "night", _half_day),
        degree_day=_nested(item, "degree_day", _flat(DegreeDay)),
        sun=_nested(item, "sun", _astro),
        moon=_nested(item, "moon", _astro),
        moon_phase=_nested(item, "moon_phase", _flat(MoonPhase)),
        air_quality=_nested(item, "air_quality", _flat(AirQuality)),
        pollen=_nested(item, "pollen", _flat(Pollen)),
        uv=_nested(item, "uv", _flat(UV)),
        sunshine_duration=item.get("sunshine_duration"),
    )


def _hourly(item: Dict[str, Any]) -> Hourly:
    return Hourly(
        date=datetime.fromisoformat(item["date"]),
        is_daylight=item.get("is_daylight", True),
        weather_text=item.get("weather_text"),
        weather_code=item.get("weather_code"),
        temperature=_nested(item, "temperature", _flat(Temperature)),
        precipitation=_nested(item, "precipitation", _flat(Precipitation)),
        precipitation_probability=_nested(item, "precipitation_probability", _flat(PrecipitationProbability)),
        wind=_nested(item, "wind", _flat(Wind)),
        air_quality=_nested(item, "air_quality", _flat(AirQuality)),
        uv=_nested(item, "uv", _flat(UV)),
        relative_humidity=item.get("relative_humidity"),
        dew_point=item.get("dew_point"),
        pressure=item.get("pressure"),
        cloud_cover=item.get("cloud_cover"),
        visibility=item.get("visibility"),
    )


def _minutely(item: Dict[str, Any]) -> Minutely:
    return Minutely(
        date=datetime.fromisoformat(item["date"]),
        minute_interval=int(item.get("minute_interval", 1)),
        precipitation_intensity=item.get("precipitation_intensity"),
    )


def _alert(item: Dict[str, Any]) -> Alert:
    return Alert(
        alert_id=item["alert_id"],
        start_date=_date(item.get("start_date")),
        end_date=_date(item.get("end_date")),
        headline=item.get("headline"),
        description=item.get("description"),
        instruction=item.get("instruction"),
        source=item.get("source"),
        severity=AlertSeverity(item.get("severity", AlertSeverity.UNKNOWN)),
        color=item.get("color"),
    )


def weather_from_dict(item: Dict[str, Any]) -> Weather:
    return Weather(
        base=Base(refresh_time=_date(item.get("refresh_time"))),
        current=_nested(item, "current", _current),
        normals=_nested(item, "normals", _flat(Normals)),
        daily_forecast=[_daily(day) for day in item.get("daily", [])],
        hourly_forecast=[_hourly(hour) for hour in item.get("hourly", [])],
        minutely_forecast=[_minutely(minute) for minute in item.get("minutely", [])],
        alert_list=[_alert(alert) for alert in item.get("alerts", [])],
    )


def location_from_dict(item: Dict[str, Any]) -> Location:
    return Location(
        id=str(item["id"]),
        latitude=float(item["latitude"]),
        longitude=float(item["longitude"]),
        timezone=item.get("timezone", "UTC"),
        country=item.get("country"),
        country_code=item.get("country_code"),
        admin1=item.get("admin1"),
        admin1_code=item.get("admin1_code"),
        admin2=item.get("admin2"),
        admin2_code=item.get("admin2_code"),
        admin3=item.get("admin3"),
        admin3_code=item.get("admin3_code"),
        admin4=item.get("admin4"),
        admin4_code=item.get("admin4_code"),
        city=item.get("city"),
        district=item.get("district"),
        weather=_nested(item, "weather", weather_from_dict),
    )
