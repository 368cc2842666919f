from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

from .weather import AirQuality


class UnsupportedMetricError(ValueError):
    """Raised when a derived value is requested for an unknown component."""


# Index scale shared by every pollutant
INDEX_THRESHOLDS = [0, 20, 50, 100, 150, 250]

# Concentration breakpoints matching INDEX_THRESHOLDS (µg/m³, CO in mg/m³)
POLLUTANT_THRESHOLDS: Dict[str, List[float]] = {
    "pm25": [0, 5, 15, 30, 60, 150],
    "pm10": [0, 15, 45, 80, 160, 400],
    "o3": [0, 50, 100, 160, 240, 480],
    "no2": [0, 10, 25, 200, 400, 1000],
    "so2": [0, 20, 40, 270, 500, 960],
    "co": [0, 2, 4, 35, 100, 230],
}

POLLUTANT_NAMES: Dict[str, str] = {
    "pm25": "Fine particulate matter (PM2.5)",
    "pm10": "Particulate matter (PM10)",
    "o3": "Ozone (O3)",
    "no2": "Nitrogen dioxide (NO2)",
    "so2": "Sulfur dioxide (SO2)",
    "co": "Carbon monoxide (CO)",
}

# ARGB, one per INDEX_THRESHOLDS level
LEVEL_COLORS = [
    0xFF00E59B,
    0xFFFFC302,
    0xFFFF712B,
    0xFFF62A55,
    0xFFC72EAA,
    0xFF9930FF,
]


def _check(pollutant: str) -> None:
    if pollutant not in POLLUTANT_THRESHOLDS:
        raise UnsupportedMetricError(f"Unsupported pollutant '{pollutant}'")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scale_index(value: float, thresholds: Sequence[float]) -> int:
    """Piecewise-linear mapping of a concentration onto INDEX_THRESHOLDS."""
    for level in range(len(thresholds) - 1):
        low, high = thresholds[level], thresholds[level + 1]
        if value < high:
            idx_low, idx_high = INDEX_THRESHOLDS[level], INDEX_THRESHOLDS[level + 1]
            return _round_half_up(idx_low + (value - low) * (idx_high - idx_low) / (high - low))
    # above the last breakpoint: extrapolate from the origin
    return _round_half_up(value * INDEX_THRESHOLDS[-1] / thresholds[-1])


def concentration(air_quality: AirQuality, pollutant: str) -> Optional[float]:
    _check(pollutant)
    return getattr(air_quality, pollutant)


def valid_pollutants(air_quality: AirQuality) -> List[str]:
    return [pid for pid in POLLUTANT_THRESHOLDS if getattr(air_quality, pid) is not None]


def is_valid(air_quality: AirQuality) -> bool:
    return bool(valid_pollutants(air_quality))


def pollutant_index(air_quality: AirQuality, pollutant: str) -> Optional[int]:
    value = concentration(air_quality, pollutant)
    if value is None:
        return None
    return scale_index(value, POLLUTANT_THRESHOLDS[pollutant])


def index(air_quality: AirQuality) -> Optional[int]:
    indexes = [pollutant_index(air_quality, pid) for pid in valid_pollutants(air_quality)]
    return max(indexes) if indexes else None


def index_color(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    level = 0
    for position, threshold in enumerate(INDEX_THRESHOLDS):
        if value >= threshold:
            level = position
    return LEVEL_COLORS[level]


def color(air_quality: AirQuality, pollutant: Optional[str] = None) -> Optional[int]:
    if pollutant is None:
        return index_color(index(air_quality))
    return index_color(pollutant_index(air_quality, pollutant))


def pollutant_name(pollutant: str) -> str:
    _check(pollutant)
    return POLLUTANT_NAMES[pollutant]
