from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .weather import Weather


@dataclass(frozen=True)
class Location:
    id: str
    latitude: float
    longitude: float
    timezone: str
    country: Optional[str] = None
    country_code: Optional[str] = None
    admin1: Optional[str] = None
    admin1_code: Optional[str] = None
    admin2: Optional[str] = None
    admin2_code: Optional[str] = None
    admin3: Optional[str] = None
    admin3_code: Optional[str] = None
    admin4: Optional[str] = None
    admin4_code: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    weather: Optional[Weather] = None
