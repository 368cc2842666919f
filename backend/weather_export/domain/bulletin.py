from __future__ import annotations

from typing import List, Optional, Protocol

from .location import Location
from .weather import Minutely, Weather, as_utc

# mm/h below which a minute is considered dry
PRECIPITATION_THRESHOLD = 0.1


class BulletinTexts(Protocol):
    """Produces the human-readable minutely bulletin."""

    def minutely_title(self, weather: Weather) -> Optional[str]:
        raise NotImplementedError

    def minutely_description(self, weather: Weather, location: Location) -> Optional[str]:
        raise NotImplementedError


def _is_wet(minute: Minutely) -> bool:
    return (minute.precipitation_intensity or 0.0) >= PRECIPITATION_THRESHOLD


def _minutes_until(minutes: List[Minutely], index: int) -> int:
    return int((as_utc(minutes[index].date) - as_utc(minutes[0].date)).total_seconds() // 60)


class DefaultBulletinTexts:
    def minutely_title(self, weather: Weather) -> Optional[str]:
        minutes = weather.minutely_forecast
        if not minutes:
            return None
        return "Precipitation" if any(_is_wet(m) for m in minutes) else "No precipitation"

    def minutely_description(self, weather: Weather, location: Location) -> Optional[str]:
        minutes = weather.minutely_forecast
        if not minutes:
            return None
        wet = [i for i, m in enumerate(minutes) if _is_wet(m)]
        if not wet:
            return "No precipitation expected for the next hour"
        if wet[0] == 0:
            dry = next((i for i in range(len(minutes)) if not _is_wet(minutes[i])), None)
            if dry is None:
                return "Precipitation continuing for the next hour"
            return f"Precipitation stopping in {_minutes_until(minutes, dry)} min"
        return f"Precipitation starting in {_minutes_until(minutes, wet[0])} min"
