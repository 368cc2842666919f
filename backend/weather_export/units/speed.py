from __future__ import annotations

from typing import Dict

from .base import UnitFamily, linear

SPEED = UnitFamily(
    "speed",
    "m/s",
    [
        linear("mps", "m/s", 1.0, 1),
        linear("kph", "km/h", 3.6, 1),
        linear("mph", "mph", 3600 / 1609.344, 1),
        linear("kn", "kn", 3600 / 1852, 1),
        linear("ftps", "ft/s", 1 / 0.3048, 1),
    ],
)

# Per-time counterpart of each distance unit
SPEED_FOR_DISTANCE: Dict[str, str] = {
    "m": "mps",
    "km": "kph",
    "mi": "mph",
    "nmi": "kn",
    "ft": "ftps",
}
