from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from babel import Locale

from weather_export.units.distance import DISTANCE
from weather_export.units.precipitation import PRECIPITATION
from weather_export.units.pressure import PRESSURE
from weather_export.units.speed import SPEED, SPEED_FOR_DISTANCE
from weather_export.units.temperature import TEMPERATURE


@dataclass(frozen=True)
class ExportPreferences:
    temperature_unit: str = "c"
    precipitation_unit: str = "mm"
    distance_unit: str = "km"
    pressure_unit: str = "mb"
    speed_unit: Optional[str] = None
    locale: str = "en_US"

    def __post_init__(self):
        # Unknown identifiers are caller defects: fail before any export runs
        TEMPERATURE.get(self.temperature_unit)
        PRECIPITATION.get(self.precipitation_unit)
        DISTANCE.get(self.distance_unit)
        PRESSURE.get(self.pressure_unit)
        if self.speed_unit is None:
            object.__setattr__(self, "speed_unit", SPEED_FOR_DISTANCE[self.distance_unit])
        SPEED.get(self.speed_unit)
        Locale.parse(self.locale)
