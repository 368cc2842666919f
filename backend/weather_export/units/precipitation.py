from __future__ import annotations

from .base import UnitFamily, linear

PRECIPITATION = UnitFamily(
    "precipitation",
    "mm",
    [
        linear("mm", "mm", 1.0, 1),
        linear("cm", "cm", 0.1, 2),
        linear("in", "in", 1 / 25.4, 2),
        # litres per square metre
        linear("lpsqm", "L/m²", 1.0, 1),
    ],
)
