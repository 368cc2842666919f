from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from weather_export.domain import air_quality as aq
from weather_export.domain import pollen as pl
from weather_export.domain.astro import moon_phase_description
from weather_export.domain.bulletin import BulletinTexts, DefaultBulletinTexts
from weather_export.domain.location import Location
from weather_export.domain.weather import (
    UV,
    AirQuality,
    Alert,
    Astro,
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
    Wind,
    as_utc,
)

from . import quantity
from .preferences import ExportPreferences
from .schema import (
    BreezyAirQuality,
    BreezyAlert,
    BreezyAstro,
    BreezyBulletin,
    BreezyCurrent,
    BreezyDaily,
    BreezyDegreeDay,
    BreezyHalfDay,
    BreezyHourly,
    BreezyMinutely,
    BreezyMoonPhase,
    BreezyNormals,
    BreezyPollen,
    BreezyPollutant,
    BreezyPrecipitation,
    BreezyPrecipitationDuration,
    BreezyPrecipitationProbability,
    BreezyTemperature,
    BreezyUV,
    BreezyWeather,
    BreezyWind,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_ms(dt: Optional[datetime]) -> Optional[int]:
    if dt is None:
        return None
    return (as_utc(dt) - EPOCH) // timedelta(milliseconds=1)


def _cloud_cover(value: Optional[int], prefs: ExportPreferences):
    return quantity.percent(float(value) if value is not None else None, prefs)


def normalize_temperature(temp: Optional[Temperature], prefs: ExportPreferences) -> Optional[BreezyTemperature]:
    if temp is None:
        return None
    return BreezyTemperature(
        temperature=quantity.temperature(temp.temperature, prefs),
        real_feel_temperature=quantity.temperature(temp.real_feel_temperature, prefs),
        real_feel_shader_temperature=quantity.temperature(temp.real_feel_shader_temperature, prefs),
        apparent_temperature=quantity.temperature(temp.apparent_temperature, prefs),
        wind_chill_temperature=quantity.temperature(temp.wind_chill_temperature, prefs),
        wet_bulb_temperature=quantity.temperature(temp.wet_bulb_temperature, prefs),
    )


def normalize_wind(wind: Optional[Wind], prefs: ExportPreferences) -> Optional[BreezyWind]:
    if wind is None:
        return None
    return BreezyWind(
        degree=wind.degree,
        speed=quantity.speed(wind.speed, prefs),
        gusts=quantity.speed(wind.gusts, prefs),
    )


def normalize_uv(uv: Optional[UV]) -> Optional[BreezyUV]:
    if uv is None:
        return None
    return BreezyUV(index=uv.index)


def normalize_air_quality(air_quality: Optional[AirQuality]) -> Optional[BreezyAirQuality]:
    if air_quality is None or not aq.is_valid(air_quality):
        return None
    pollutants: Dict[str, BreezyPollutant] = {}
    for pid in aq.valid_pollutants(air_quality):
        pollutants[pid] = BreezyPollutant(
            id=pid,
            name=aq.pollutant_name(pid),
            concentration=aq.concentration(air_quality, pid),
            index=aq.pollutant_index(air_quality, pid),
            color=aq.color(air_quality, pid),
        )
    return BreezyAirQuality(
        index=aq.index(air_quality),
        index_color=aq.color(air_quality),
        pollutants=pollutants,
    )


def normalize_pollen(pollen: Optional[Pollen]) -> Optional[Dict[str, BreezyPollen]]:
    if pollen is None or not pl.is_valid(pollen):
        return None
    return {
        cid: BreezyPollen(
            id=cid,
            name=pl.pollen_name(cid),
            concentration=pl.concentration(pollen, cid),
            index_name=pl.index_name(pollen, cid),
            color=pl.color(pollen, cid),
        )
        for cid in pl.valid_pollens(pollen)
    }


def normalize_precipitation(
    precipitation: Optional[Precipitation], prefs: ExportPreferences
) -> Optional[BreezyPrecipitation]:
    if precipitation is None:
        return None
    return BreezyPrecipitation(
        total=quantity.precipitation(precipitation.total, prefs),
        thunderstorm=quantity.precipitation(precipitation.thunderstorm, prefs),
        rain=quantity.precipitation(precipitation.rain, prefs),
        snow=quantity.precipitation(precipitation.snow, prefs),
        ice=quantity.precipitation(precipitation.ice, prefs),
    )


def normalize_precipitation_probability(
    probability: Optional[PrecipitationProbability], prefs: ExportPreferences
) -> Optional[BreezyPrecipitationProbability]:
    if probability is None:
        return None
    return BreezyPrecipitationProbability(
        total=quantity.percent(probability.total, prefs),
        thunderstorm=quantity.percent(probability.thunderstorm, prefs),
        rain=quantity.percent(probability.rain, prefs),
        snow=quantity.percent(probability.snow, prefs),
        ice=quantity.percent(probability.ice, prefs),
    )


def normalize_precipitation_duration(
    precipitation_duration: Optional[PrecipitationDuration], prefs: ExportPreferences
) -> Optional[BreezyPrecipitationDuration]:
    if precipitation_duration is None:
        return None
    return BreezyPrecipitationDuration(
        total=quantity.duration(precipitation_duration.total, prefs),
        thunderstorm=quantity.duration(precipitation_duration.thunderstorm, prefs),
        rain=quantity.duration(precipitation_duration.rain, prefs),
        snow=quantity.duration(precipitation_duration.snow, prefs),
        ice=quantity.duration(precipitation_duration.ice, prefs),
    )


def normalize_current(current: Optional[Current], prefs: ExportPreferences) -> Optional[BreezyCurrent]:
    if current is None:
        return None
    return BreezyCurrent(
        weather_text=current.weather_text,
        weather_code=current.weather_code,
        temperature=normalize_temperature(current.temperature, prefs),
        wind=normalize_wind(current.wind, prefs),
        uv=normalize_uv(current.uv),
        air_quality=normalize_air_quality(current.air_quality),
        relative_humidity=quantity.percent(current.relative_humidity, prefs),
        dew_point=quantity.temperature(current.dew_point, prefs),
        pressure=quantity.pressure(current.pressure, prefs),
        cloud_cover=_cloud_cover(current.cloud_cover, prefs),
        visibility=quantity.distance(current.visibility, prefs),
        ceiling=quantity.distance(current.ceiling, prefs),
    )


def normalize_half_day(half_day: Optional[HalfDay], prefs: ExportPreferences) -> Optional[BreezyHalfDay]:
    if half_day is None:
        return None
    return BreezyHalfDay(
        weather_text=half_day.weather_text,
        weather_phase=half_day.weather_phase,
        weather_code=half_day.weather_code,
        temperature=normalize_temperature(half_day.temperature, prefs),
        precipitation=normalize_precipitation(half_day.precipitation, prefs),
        precipitation_probability=normalize_precipitation_probability(half_day.precipitation_probability, prefs),
        precipitation_duration=normalize_precipitation_duration(half_day.precipitation_duration, prefs),
        wind=normalize_wind(half_day.wind, prefs),
        cloud_cover=_cloud_cover(half_day.cloud_cover, prefs),
    )


def normalize_degree_day(degree_day: Optional[DegreeDay], prefs: ExportPreferences) -> Optional[BreezyDegreeDay]:
    if degree_day is None:
        return None
    return BreezyDegreeDay(
        heating=quantity.degree_day(degree_day.heating, prefs),
        cooling=quantity.degree_day(degree_day.cooling, prefs),
    )


def normalize_astro(astro: Optional[Astro]) -> Optional[BreezyAstro]:
    if astro is None:
        return None
    return BreezyAstro(rise_date=to_epoch_ms(astro.rise_date), set_date=to_epoch_ms(astro.set_date))


def normalize_moon_phase(moon_phase: Optional[MoonPhase]) -> Optional[BreezyMoonPhase]:
    if moon_phase is None:
        return None
    return BreezyMoonPhase(angle=moon_phase.angle, description=moon_phase_description(moon_phase.angle))


def normalize_daily(daily: List[Daily], prefs: ExportPreferences) -> List[BreezyDaily]:
    return [
        BreezyDaily(
            date=to_epoch_ms(day.date),
            day=normalize_half_day(day.day, prefs),
            night=normalize_half_day(day.night, prefs),
            degree_day=normalize_degree_day(day.degree_day, prefs),
            sun=normalize_astro(day.sun),
            moon=normalize_astro(day.moon),
            moon_phase=normalize_moon_phase(day.moon_phase),
            air_quality=normalize_air_quality(day.air_quality),
            pollen=normalize_pollen(day.pollen),
            uv=normalize_uv(day.uv),
            sunshine_duration=quantity.duration(day.sunshine_duration, prefs),
        )
        for day in daily
    ]


def normalize_hourly(hourly: List[Hourly], prefs: ExportPreferences) -> List[BreezyHourly]:
    return [
        BreezyHourly(
            date=to_epoch_ms(hour.date),
            is_daylight=hour.is_daylight,
            weather_text=hour.weather_text,
            weather_code=hour.weather_code,
            temperature=normalize_temperature(hour.temperature, prefs),
            precipitation=normalize_precipitation(hour.precipitation, prefs),
            precipitation_probability=normalize_precipitation_probability(hour.precipitation_probability, prefs),
            wind=normalize_wind(hour.wind, prefs),
            air_quality=normalize_air_quality(hour.air_quality),
            uv=normalize_uv(hour.uv),
            relative_humidity=quantity.percent(hour.relative_humidity, prefs),
            dew_point=quantity.temperature(hour.dew_point, prefs),
            pressure=quantity.pressure(hour.pressure, prefs),
            cloud_cover=_cloud_cover(hour.cloud_cover, prefs),
            visibility=quantity.distance(hour.visibility, prefs),
        )
        for hour in hourly
    ]


def normalize_minutely(minutely: List[Minutely], prefs: ExportPreferences) -> List[BreezyMinutely]:
    return [
        BreezyMinutely(
            date=to_epoch_ms(minute.date),
            minute_interval=minute.minute_interval,
            precipitation_intensity=quantity.precipitation(minute.precipitation_intensity, prefs),
        )
        for minute in minutely
    ]


def normalize_alerts(alerts: List[Alert]) -> List[BreezyAlert]:
    return [
        BreezyAlert(
            alert_id=alert.alert_id,
            start_date=to_epoch_ms(alert.start_date),
            end_date=to_epoch_ms(alert.end_date),
            headline=alert.headline,
            description=alert.description,
            instruction=alert.instruction,
            source=alert.source,
            severity=int(alert.severity),
            color=alert.color,
        )
        for alert in alerts
    ]


def normalize_normals(normals: Optional[Normals], prefs: ExportPreferences) -> Optional[BreezyNormals]:
    if normals is None:
        return None
    return BreezyNormals(
        month=normals.month,
        daytime_temperature=quantity.temperature(normals.daytime_temperature, prefs),
        nighttime_temperature=quantity.temperature(normals.nighttime_temperature, prefs),
    )


def normalize_weather(
    location: Location,
    prefs: ExportPreferences,
    texts: Optional[BulletinTexts] = None,
) -> Optional[BreezyWeather]:
    """Build the transport tree for the weather attached to ``location``."""
    weather = location.weather
    if weather is None:
        return None
    texts = texts or DefaultBulletinTexts()
    current = weather.current
    return BreezyWeather(
        refresh_time=to_epoch_ms(weather.base.refresh_time),
        bulletin=BreezyBulletin(
            daily_forecast=current.daily_forecast if current else None,
            hourly_forecast=current.hourly_forecast if current else None,
            minutely_forecast_title=texts.minutely_title(weather),
            minutely_forecast_description=texts.minutely_description(weather, location),
        ),
        current=normalize_current(current, prefs),
        daily=normalize_daily(weather.daily_forecast, prefs),
        hourly=normalize_hourly(weather.hourly_forecast, prefs),
        minutely=normalize_minutely(weather.minutely_forecast, prefs),
        alerts=normalize_alerts(weather.alert_list),
        normals=normalize_normals(weather.normals, prefs),
    )
