from __future__ import annotations

from .base import UnitFamily, linear

PRESSURE = UnitFamily(
    "pressure",
    "mb",
    [
        linear("mb", "mb", 1.0, 1),
        linear("hpa", "hPa", 1.0, 1),
        linear("kpa", "kPa", 0.1, 2),
        linear("atm", "atm", 1 / 1013.25, 3),
        linear("mmhg", "mmHg", 0.750062, 1),
        linear("inhg", "inHg", 0.0295300, 2),
        linear("kgfpsqcm", "kgf/cm²", 0.00101972, 3),
    ],
)
