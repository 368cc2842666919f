"""Transport schema exposed to third-party consumers.

Field names are part of the public contract: renaming or removing a field
requires a major version bump, adding one a minor bump.

``originalUnit`` is always one of the canonical storage units: ``c`` for
temperatures and degree days, ``mm`` for precipitation, ``m`` for distances,
``m/s`` for wind speed, ``mb`` for pressure and ``h`` for durations.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BreezyModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BreezyQuantity(BreezyModel):
    original_value: float
    original_unit: str
    preferred_unit_value: float
    preferred_unit_unit: str
    preferred_unit_formatted: str
    preferred_unit_formatted_short: str


class BreezyPercent(BreezyModel):
    value: float
    formatted: str


class BreezyUV(BreezyModel):
    index: Optional[float] = None


class BreezyTemperature(BreezyModel):
    temperature: Optional[BreezyQuantity] = None
    real_feel_temperature: Optional[BreezyQuantity] = None
    real_feel_shader_temperature: Optional[BreezyQuantity] = None
    apparent_temperature: Optional[BreezyQuantity] = None
    wind_chill_temperature: Optional[BreezyQuantity] = None
    wet_bulb_temperature: Optional[BreezyQuantity] = None


class BreezyWind(BreezyModel):
    degree: Optional[float] = None
    speed: Optional[BreezyQuantity] = None
    gusts: Optional[BreezyQuantity] = None


class BreezyPollutant(BreezyModel):
    id: str
    name: Optional[str] = None
    concentration: Optional[float] = None
    index: Optional[int] = None
    color: Optional[int] = None


class BreezyAirQuality(BreezyModel):
    index: Optional[int] = None
    index_color: Optional[int] = None
    # pollutant id -> details
    pollutants: Optional[Dict[str, BreezyPollutant]] = None


class BreezyPollen(BreezyModel):
    id: str
    name: Optional[str] = None
    concentration: Optional[int] = None
    index_name: Optional[str] = None
    color: Optional[int] = None


class BreezyPrecipitation(BreezyModel):
    total: Optional[BreezyQuantity] = None
    thunderstorm: Optional[BreezyQuantity] = None
    rain: Optional[BreezyQuantity] = None
    snow: Optional[BreezyQuantity] = None
    ice: Optional[BreezyQuantity] = None


class BreezyPrecipitationProbability(BreezyModel):
    total: Optional[BreezyPercent] = None
    thunderstorm: Optional[BreezyPercent] = None
    rain: Optional[BreezyPercent] = None
    snow: Optional[BreezyPercent] = None
    ice: Optional[BreezyPercent] = None


class BreezyPrecipitationDuration(BreezyModel):
    total: Optional[BreezyQuantity] = None
    thunderstorm: Optional[BreezyQuantity] = None
    rain: Optional[BreezyQuantity] = None
    snow: Optional[BreezyQuantity] = None
    ice: Optional[BreezyQuantity] = None


class BreezyDegreeDay(BreezyModel):
    heating: Optional[BreezyQuantity] = None
    cooling: Optional[BreezyQuantity] = None


class BreezyAstro(BreezyModel):
    rise_date: Optional[int] = None
    set_date: Optional[int] = None


class BreezyMoonPhase(BreezyModel):
    angle: Optional[int] = None
    description: Optional[str] = None


class BreezyCurrent(BreezyModel):
    # Provided by the source, or derived from the weather code
    weather_text: Optional[str] = None
    weather_code: Optional[str] = None
    temperature: Optional[BreezyTemperature] = None
    wind: Optional[BreezyWind] = None
    uv: Optional[BreezyUV] = Field(default=None, alias="uV")
    air_quality: Optional[BreezyAirQuality] = None
    relative_humidity: Optional[BreezyPercent] = None
    dew_point: Optional[BreezyQuantity] = None
    # Sea level
    pressure: Optional[BreezyQuantity] = None
    cloud_cover: Optional[BreezyPercent] = None
    visibility: Optional[BreezyQuantity] = None
    ceiling: Optional[BreezyQuantity] = None


class BreezyHalfDay(BreezyModel):
    weather_text: Optional[str] = None
    weather_phase: Optional[str] = None
    weather_code: Optional[str] = None
    temperature: Optional[BreezyTemperature] = None
    precipitation: Optional[BreezyPrecipitation] = None
    precipitation_probability: Optional[BreezyPrecipitationProbability] = None
    precipitation_duration: Optional[BreezyPrecipitationDuration] = None
    wind: Optional[BreezyWind] = None
    cloud_cover: Optional[BreezyPercent] = None


class BreezyDaily(BreezyModel):
    date: int
    day: Optional[BreezyHalfDay] = None
    night: Optional[BreezyHalfDay] = None
    degree_day: Optional[BreezyDegreeDay] = None
    sun: Optional[BreezyAstro] = None
    moon: Optional[BreezyAstro] = None
    moon_phase: Optional[BreezyMoonPhase] = None
    air_quality: Optional[BreezyAirQuality] = None
    # allergen id -> details
    pollen: Optional[Dict[str, BreezyPollen]] = None
    uv: Optional[BreezyUV] = Field(default=None, alias="uV")
    sunshine_duration: Optional[BreezyQuantity] = None


class BreezyHourly(BreezyModel):
    date: int
    is_daylight: bool = True
    weather_text: Optional[str] = None
    weather_code: Optional[str] = None
    temperature: Optional[BreezyTemperature] = None
    precipitation: Optional[BreezyPrecipitation] = None
    precipitation_probability: Optional[BreezyPrecipitationProbability] = None
    wind: Optional[BreezyWind] = None
    air_quality: Optional[BreezyAirQuality] = None
    uv: Optional[BreezyUV] = Field(default=None, alias="uV")
    relative_humidity: Optional[BreezyPercent] = None
    dew_point: Optional[BreezyQuantity] = None
    pressure: Optional[BreezyQuantity] = None
    cloud_cover: Optional[BreezyPercent] = None
    visibility: Optional[BreezyQuantity] = None


class BreezyMinutely(BreezyModel):
    date: int
    minute_interval: int
    precipitation_intensity: Optional[BreezyQuantity] = None


class BreezyAlert(BreezyModel):
    alert_id: str
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    instruction: Optional[str] = None
    source: Optional[str] = None
    severity: int
    color: Optional[int] = None


class BreezyNormals(BreezyModel):
    month: Optional[int] = None
    daytime_temperature: Optional[BreezyQuantity] = None
    nighttime_temperature: Optional[BreezyQuantity] = None


class BreezyBulletin(BreezyModel):
    daily_forecast: Optional[str] = None
    hourly_forecast: Optional[str] = None
    minutely_forecast_title: Optional[str] = None
    minutely_forecast_description: Optional[str] = None


class BreezyWeather(BreezyModel):
    refresh_time: Optional[int] = None
    bulletin: Optional[BreezyBulletin] = None
    current: Optional[BreezyCurrent] = None
    daily: Optional[List[BreezyDaily]] = None
    hourly: Optional[List[BreezyHourly]] = None
    minutely: Optional[List[BreezyMinutely]] = None
    alerts: Optional[List[BreezyAlert]] = None
    normals: Optional[BreezyNormals] = None
