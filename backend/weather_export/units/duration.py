from __future__ import annotations

from .base import UnitFamily, linear

DURATION = UnitFamily("duration", "h", [linear("h", "h", 1.0, 1)])
