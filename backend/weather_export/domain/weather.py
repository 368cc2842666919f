from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import List, Optional

# Canonical storage units: temperature in °C, precipitation in mm, distance in m,
# wind speed in m/s, pressure in mb, durations in hours, ratios on a 0-100 scale.


def as_utc(dt: datetime) -> datetime:
    # Naive datetimes are read as UTC
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


class AlertSeverity(IntEnum):
    UNKNOWN = 0
    MINOR = 1
    MODERATE = 2
    SEVERE = 3
    EXTREME = 4


@dataclass(frozen=True)
class Temperature:
    temperature: Optional[float] = None
    real_feel_temperature: Optional[float] = None
    real_feel_shader_temperature: Optional[float] = None
    apparent_temperature: Optional[float] = None
    wind_chill_temperature: Optional[float] = None
    wet_bulb_temperature: Optional[float] = None


@dataclass(frozen=True)
class Wind:
    degree: Optional[float] = None
    speed: Optional[float] = None
    gusts: Optional[float] = None


@dataclass(frozen=True)
class UV:
    index: Optional[float] = None


@dataclass(frozen=True)
class AirQuality:
    """Pollutant concentrations in µg/m³ (CO in mg/m³)."""

    pm25: Optional[float] = None
    pm10: Optional[float] = None
    so2: Optional[float] = None
    no2: Optional[float] = None
    o3: Optional[float] = None
    co: Optional[float] = None


@dataclass(frozen=True)
class Pollen:
    """Allergen concentrations in grains/m³ (spores/m³ for mold)."""

    alder: Optional[int] = None
    ash: Optional[int] = None
    birch: Optional[int] = None
    chestnut: Optional[int] = None
    cypress: Optional[int] = None
    grass: Optional[int] = None
    hazel: Optional[int] = None
    hornbeam: Optional[int] = None
    linden: Optional[int] = None
    mold: Optional[int] = None
    mugwort: Optional[int] = None
    oak: Optional[int] = None
    olive: Optional[int] = None
    plane: Optional[int] = None
    plantain: Optional[int] = None
    poplar: Optional[int] = None
    ragweed: Optional[int] = None
    sorrel: Optional[int] = None
    tree: Optional[int] = None
    urticaceae: Optional[int] = None
    willow: Optional[int] = None


@dataclass(frozen=True)
class Precipitation:
    total: Optional[float] = None
    thunderstorm: Optional[float] = None
    rain: Optional[float] = None
    snow: Optional[float] = None
    ice: Optional[float] = None


@dataclass(frozen=True)
class PrecipitationProbability:
    total: Optional[float] = None
    thunderstorm: Optional[float] = None
    rain: Optional[float] = None
    snow: Optional[float] = None
    ice: Optional[float] = None


@dataclass(frozen=True)
class PrecipitationDuration:
    total: Optional[float] = None
    thunderstorm: Optional[float] = None
    rain: Optional[float] = None
    snow: Optional[float] = None
    ice: Optional[float] = None


@dataclass(frozen=True)
class DegreeDay:
    heating: Optional[float] = None
    cooling: Optional[float] = None


@dataclass(frozen=True)
class Astro:
    rise_date: Optional[datetime] = None
    set_date: Optional[datetime] = None


@dataclass(frozen=True)
class MoonPhase:
    angle: Optional[int] = None


@dataclass(frozen=True)
class Current:
    weather_text: Optional[str] = None
    weather_code: Optional[str] = None
    temperature: Optional[Temperature] = None
    wind: Optional[Wind] = None
    uv: Optional[UV] = None
    air_quality: Optional[AirQuality] = None
    relative_humidity: Optional[float] = None
    dew_point: Optional[float] = None
    pressure: Optional[float] = None
    cloud_cover: Optional[int] = None
    visibility: Optional[float] = None
    ceiling: Optional[float] = None
    daily_forecast: Optional[str] = None
    hourly_forecast: Optional[str] = None


@dataclass(frozen=True)
class HalfDay:
    weather_text: Optional[str] = None
    weather_phase: Optional[str] = None
    weather_code: Optional[str] = None
    temperature: Optional[Temperature] = None
    precipitation: Optional[Precipitation] = None
    precipitation_probability: Optional[PrecipitationProbability] = None
    precipitation_duration: Optional[PrecipitationDuration] = None
    wind: Optional[Wind] = None
    cloud_cover: Optional[int] = None


@dataclass(frozen=True)
class Daily:
    date: datetime
    day: Optional[HalfDay] = None
    night: Optional[HalfDay] = None
    degree_day: Optional[DegreeDay] = None
    sun: Optional[Astro] = None
    moon: Optional[Astro] = None
    moon_phase: Optional[MoonPhase] = None
    air_quality: Optional[AirQuality] = None
    pollen: Optional[Pollen] = None
    uv: Optional[UV] = None
    sunshine_duration: Optional[float] = None


@dataclass(frozen=True)
class Hourly:
    date: datetime
    is_daylight: bool = True
    weather_text: Optional[str] = None
    weather_code: Optional[str] = None
    temperature: Optional[Temperature] = None
    precipitation: Optional[Precipitation] = None
    precipitation_probability: Optional[PrecipitationProbability] = None
    wind: Optional[Wind] = None
    air_quality: Optional[AirQuality] = None
    uv: Optional[UV] = None
    relative_humidity: Optional[float] = None
    dew_point: Optional[float] = None
    pressure: Optional[float] = None
    cloud_cover: Optional[int] = None
    visibility: Optional[float] = None


@dataclass(frozen=True)
class Minutely:
    date: datetime
    minute_interval: int
    precipitation_intensity: Optional[float] = None


@dataclass(frozen=True)
class Alert:
    alert_id: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    instruction: Optional[str] = None
    source: Optional[str] = None
    severity: AlertSeverity = AlertSeverity.UNKNOWN
    color: Optional[int] = None


@dataclass(frozen=True)
class Normals:
    month: Optional[int] = None
    daytime_temperature: Optional[float] = None
    nighttime_temperature: Optional[float] = None


@dataclass(frozen=True)
class Base:
    refresh_time: Optional[datetime] = None


@dataclass(frozen=True)
class Weather:
    base: Base = field(default_factory=Base)
    current: Optional[Current] = None
    normals: Optional[Normals] = None
    daily_forecast: List[Daily] = field(default_factory=list)
    hourly_forecast: List[Hourly] = field(default_factory=list)
    minutely_forecast: List[Minutely] = field(default_factory=list)
    alert_list: List[Alert] = field(default_factory=list)
