from __future__ import annotations

from .base import UnitFamily, linear

DISTANCE = UnitFamily(
    "distance",
    "m",
    [
        linear("m", "m", 1.0, 0),
        linear("km", "km", 0.001, 1),
        linear("mi", "mi", 1 / 1609.344, 1),
        linear("nmi", "nmi", 1 / 1852, 1),
        linear("ft", "ft", 1 / 0.3048, 0),
    ],
)
