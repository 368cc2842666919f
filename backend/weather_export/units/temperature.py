from __future__ import annotations

from typing import Callable, Dict, Iterable

from .base import UnitDefinition, UnitFamily

# Degree-days are temperature differences, so no zero-point offset applies.
_DEGREE_DAY: Dict[str, Callable[[float], float]] = {
    "c": lambda value: value,
    "f": lambda value: value * 9 / 5,
    "k": lambda value: value,
}


class TemperatureFamily(UnitFamily):
    def __init__(self, units: Iterable[UnitDefinition]) -> None:
        super().__init__("temperature", "c", units)

    def convert_degree_day(self, value: float, unit_id: str) -> float:
        self.get(unit_id)
        return _DEGREE_DAY[unit_id](value)


TEMPERATURE = TemperatureFamily(
    [
        UnitDefinition(
            id="c",
            symbol="°C",
            short_symbol="°",
            decimals=1,
            separator="",
            convert=lambda value: value,
            revert=lambda value: value,
        ),
        UnitDefinition(
            id="f",
            symbol="°F",
            short_symbol="°",
            decimals=1,
            separator="",
            convert=lambda value: value * 9 / 5 + 32,
            revert=lambda value: (value - 32) * 5 / 9,
        ),
        UnitDefinition(
            id="k",
            symbol="K",
            decimals=1,
            separator="",
            convert=lambda value: value + 273.15,
            revert=lambda value: value - 273.15,
        ),
    ]
)
