from __future__ import annotations

from typing import Optional

MOON_PHASES = [
    "New moon",
    "Waxing crescent",
    "First quarter",
    "Waxing gibbous",
    "Full moon",
    "Waning gibbous",
    "Third quarter",
    "Waning crescent",
]


def moon_phase_description(angle: Optional[int]) -> Optional[str]:
    """Name of the phase for an angle in degrees (0 = new moon, 180 = full moon)."""
    if angle is None:
        return None
    # each named phase covers 45°, centred on its nominal angle
    sector = int(((angle % 360) + 22.5) // 45) % len(MOON_PHASES)
    return MOON_PHASES[sector]
