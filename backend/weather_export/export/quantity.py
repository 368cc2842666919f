"""Projection of raw canonical values into transport quantities.

Every helper returns ``None`` for a ``None`` input without touching the
unit family, so absence propagates untouched through the export tree.
"""
from __future__ import annotations

from typing import Optional

from weather_export.units.base import UnitFamily
from weather_export.units.distance import DISTANCE
from weather_export.units.duration import DURATION
from weather_export.units.percent import format_percent
from weather_export.units.precipitation import PRECIPITATION
from weather_export.units.pressure import PRESSURE
from weather_export.units.speed import SPEED
from weather_export.units.temperature import TEMPERATURE

from .preferences import ExportPreferences
from .schema import BreezyPercent, BreezyQuantity

TEMPERATURE_PRECISION = 0


def project(
    raw: Optional[float],
    canonical_unit: str,
    family: UnitFamily,
    preferred_unit: str,
    *,
    locale,
    precision: Optional[int] = None,
) -> Optional[BreezyQuantity]:
    if raw is None:
        return None
    return BreezyQuantity(
        original_value=raw,
        original_unit=canonical_unit,
        preferred_unit_value=family.convert(raw, preferred_unit),
        preferred_unit_unit=preferred_unit,
        preferred_unit_formatted=family.format(locale, raw, preferred_unit, precision),
        preferred_unit_formatted_short=family.format_short(locale, raw, preferred_unit, precision),
    )


def temperature(raw: Optional[float], prefs: ExportPreferences) -> Optional[BreezyQuantity]:
    return project(
        raw,
        TEMPERATURE.canonical,
        TEMPERATURE,
        prefs.temperature_unit,
        locale=prefs.locale,
        precision=TEMPERATURE_PRECISION,
    )


def degree_day(raw: Optional[float], prefs: ExportPreferences) -> Optional[BreezyQuantity]:
    # FIXME: formatted strings come from the plain temperature formatter, so
    # they carry the zero-point offset the converted value does not.
    if raw is None:
        return None
    unit = prefs.temperature_unit
    formatted = TEMPERATURE.format(prefs.locale, raw, unit, TEMPERATURE_PRECISION)
    return BreezyQuantity(
        original_value=raw,
        original_unit=TEMPERATURE.canonical,
        preferred_unit_value=TEMPERATURE.convert_degree_day(raw, unit),
        preferred_unit_unit=unit,
        preferred_unit_formatted=formatted,
        preferred_unit_formatted_short=formatted,
    )


def precipitation(raw: Optional[float], prefs: ExportPreferences) -> Optional[BreezyQuantity]:
    return project(raw, PRECIPITATION.canonical, PRECIPITATION, prefs.precipitation_unit, locale=prefs.locale)


def distance(raw: Optional[float], prefs: ExportPreferences) -> Optional[BreezyQuantity]:
    return project(raw, DISTANCE.canonical, DISTANCE, prefs.distance_unit, locale=prefs.locale)


def speed(raw: Optional[float], prefs: ExportPreferences) -> Optional[BreezyQuantity]:
    return project(raw, SPEED.canonical, SPEED, prefs.speed_unit, locale=prefs.locale)


def pressure(raw: Optional[float], prefs: ExportPreferences) -> Optional[BreezyQuantity]:
    return project(raw, PRESSURE.canonical, PRESSURE, prefs.pressure_unit, locale=prefs.locale)


def duration(raw: Optional[float], prefs: ExportPreferences) -> Optional[BreezyQuantity]:
    # Durations are always exported in hours
    return project(raw, DURATION.canonical, DURATION, DURATION.canonical, locale=prefs.locale)


def percent(raw: Optional[float], prefs: ExportPreferences, digits: int = 0) -> Optional[BreezyPercent]:
    if raw is None:
        return None
    return BreezyPercent(value=raw, formatted=format_percent(prefs.locale, raw, digits))
