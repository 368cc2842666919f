from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from weather_export.domain.bulletin import BulletinTexts, DefaultBulletinTexts
from weather_export.domain.location import Location
from weather_export.infra.location_repository import LocationRepository

from .normalizer import normalize_weather
from .preferences import ExportPreferences
from .schema import BreezyWeather

logger = logging.getLogger(__name__)

PATH_VERSION = "version"
PATH_LOCATION = "location"


class Version:
    COLUMN_MAJOR = "major"  # renamed, retyped or removed fields
    COLUMN_MINOR = "minor"  # added fields
    MAJOR = 0
    MINOR = 1


class LocationColumns:
    # The id can change between queries
    ID = "id"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    TIMEZONE = "timezone"
    COUNTRY = "country"
    COUNTRY_CODE = "country_code"
    ADMIN1 = "admin1"
    ADMIN1_CODE = "admin1_code"
    ADMIN2 = "admin2"
    ADMIN2_CODE = "admin2_code"
    ADMIN3 = "admin3"
    ADMIN3_CODE = "admin3_code"
    ADMIN4 = "admin4"
    ADMIN4_CODE = "admin4_code"
    CITY = "city"
    DISTRICT = "district"
    WEATHER = "weather"

    ALL = (
        ID,
        LATITUDE,
        LONGITUDE,
        TIMEZONE,
        COUNTRY,
        COUNTRY_CODE,
        ADMIN1,
        ADMIN1_CODE,
        ADMIN2,
        ADMIN2_CODE,
        ADMIN3,
        ADMIN3_CODE,
        ADMIN4,
        ADMIN4_CODE,
        CITY,
        DISTRICT,
        WEATHER,
    )


def encode_weather(tree: Optional[BreezyWeather]) -> str:
    if tree is None:
        return "null"
    return tree.model_dump_json(by_alias=True, exclude_none=True)


@dataclass
class MatrixCursor:
    columns: Sequence[str]
    rows: List[List[Any]] = field(default_factory=list)

    def add_row(self, values: Sequence[Any]) -> None:
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.rows.append(list(values))

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [dict(zip(self.columns, row)) for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)


class WeatherContentProvider:
    """Read-only, column-oriented export of every location's weather."""

    def __init__(
        self,
        repository: LocationRepository,
        preferences: ExportPreferences,
        texts: Optional[BulletinTexts] = None,
    ) -> None:
        self.repository = repository
        self.preferences = preferences
        self.texts = texts or DefaultBulletinTexts()

    def query(self, path: str) -> Optional[MatrixCursor]:
        path = path.strip("/")
        if path == PATH_VERSION:
            return self.query_version()
        if path == PATH_LOCATION:
            return self.query_weather()
        logger.warning("Unrecognized path %s", path)
        return None

    def query_version(self) -> MatrixCursor:
        cursor = MatrixCursor([Version.COLUMN_MAJOR, Version.COLUMN_MINOR])
        cursor.add_row([Version.MAJOR, Version.MINOR])
        return cursor

    def query_weather(self) -> MatrixCursor:
        return self.weather_cursor(self.repository.get_all_locations(with_parameters=False))

    def weather_cursor(self, locations: Sequence[Location]) -> MatrixCursor:
        cursor = MatrixCursor(list(LocationColumns.ALL))
        for location in locations:
            if location.weather is None or location.weather.current is None:
                logger.debug("Skipping location %s without current weather", location.id)
                continue
            cursor.add_row(self._row(location))
        return cursor

    def _row(self, location: Location) -> List[Any]:
        tree = normalize_weather(location, self.preferences, self.texts)
        return [
            location.id,
            location.latitude,
            location.longitude,
            location.timezone,
            location.country,
            location.country_code,
            location.admin1,
            location.admin1_code,
            location.admin2,
            location.admin2_code,
            location.admin3,
            location.admin3_code,
            location.admin4,
            location.admin4_code,
            location.city,
            location.district,
            encode_weather(tree),
        ]

    def get_type(self, path: str) -> Optional[str]:
        return None

    # Writes are not supported
    def insert(self, path: str, values: Optional[Dict[str, Any]] = None) -> Optional[str]:
        return None

    def update(self, path: str, values: Optional[Dict[str, Any]] = None, selection: Optional[str] = None) -> int:
        return 0

    def delete(self, path: str, selection: Optional[str] = None) -> int:
        return 0
