from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from weather_export.export.preferences import ExportPreferences

DEFAULT_LOCATIONS_FILE = Path(__file__).resolve().parent / "cli" / "sample_locations.json"


def load_preferences(env: Optional[Mapping[str, str]] = None) -> ExportPreferences:
    env = os.environ if env is None else env
    return ExportPreferences(
        temperature_unit=env.get("BREEZY_TEMPERATURE_UNIT", "c"),
        precipitation_unit=env.get("BREEZY_PRECIPITATION_UNIT", "mm"),
        distance_unit=env.get("BREEZY_DISTANCE_UNIT", "km"),
        pressure_unit=env.get("BREEZY_PRESSURE_UNIT", "mb"),
        speed_unit=env.get("BREEZY_SPEED_UNIT") or None,
        locale=env.get("BREEZY_LOCALE", "en_US"),
    )


def locations_file(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    configured = env.get("BREEZY_LOCATIONS_FILE")
    return Path(configured) if configured else DEFAULT_LOCATIONS_FILE
