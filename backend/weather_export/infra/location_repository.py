from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Protocol

from weather_export.domain.location import Location

from .weather_json import location_from_dict


class LocationRepository(Protocol):
    """Contract for whatever stores locations and their latest weather."""

    def get_all_locations(self, with_parameters: bool = False) -> List[Location]:
        raise NotImplementedError


class InMemoryLocationRepository(LocationRepository):
    def __init__(self, locations: Iterable[Location] = ()) -> None:
        self._locations: List[Location] = list(locations)

    def add(self, location: Location) -> None:
        self._locations.append(location)

    def get_all_locations(self, with_parameters: bool = False) -> List[Location]:
        return list(self._locations)


class JsonLocationRepository(LocationRepository):
    """Locations read from a JSON document on every call."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get_all_locations(self, with_parameters: bool = False) -> List[Location]:
        if not self.path.exists():
            raise FileNotFoundError(f"Locations file not found: {self.path}")
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload.get("locations", [])
        return [location_from_dict(item) for item in payload]
