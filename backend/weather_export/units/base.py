from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from babel.numbers import format_decimal


class UnknownUnitError(ValueError):
    """Raised when a unit identifier is not part of a family."""


@dataclass(frozen=True)
class UnitDefinition:
    id: str
    symbol: str
    decimals: int
    convert: Callable[[float], float]
    revert: Callable[[float], float]
    short_symbol: Optional[str] = None
    separator: str = " "


def linear(unit_id: str, symbol: str, factor: float, decimals: int, **kwargs) -> UnitDefinition:
    return UnitDefinition(
        id=unit_id,
        symbol=symbol,
        decimals=decimals,
        convert=lambda value: value * factor,
        revert=lambda value: value / factor,
        **kwargs,
    )


def number_pattern(decimals: int) -> str:
    if decimals <= 0:
        return "#,##0"
    return "#,##0." + "#" * decimals


class UnitFamily:
    """Closed set of display units for one physical quantity.

    Values enter in the canonical storage unit; every unit knows how to
    convert from it, back to it, and how to render itself.
    """

    def __init__(self, kind: str, canonical: str, units: Iterable[UnitDefinition]) -> None:
        self.kind = kind
        self.canonical = canonical
        self._units: Dict[str, UnitDefinition] = {}
        for unit in units:
            if unit.id in self._units:
                raise ValueError(f"Unit '{unit.id}' already defined for {kind}")
            self._units[unit.id] = unit

    def get(self, unit_id: str) -> UnitDefinition:
        try:
            return self._units[unit_id]
        except KeyError as exc:
            raise UnknownUnitError(f"Unknown {self.kind} unit '{unit_id}'") from exc

    def ids(self) -> List[str]:
        return list(self._units.keys())

    def convert(self, value: float, unit_id: str) -> float:
        return self.get(unit_id).convert(value)

    def revert(self, value: float, unit_id: str) -> float:
        return self.get(unit_id).revert(value)

    def format(self, locale, value: float, unit_id: str, precision: Optional[int] = None) -> str:
        unit = self.get(unit_id)
        number = self._format_number(locale, unit.convert(value), unit, precision)
        return f"{number}{unit.separator}{unit.symbol}"

    def format_short(self, locale, value: float, unit_id: str, precision: Optional[int] = None) -> str:
        unit = self.get(unit_id)
        number = self._format_number(locale, unit.convert(value), unit, precision)
        return f"{number}{unit.short_symbol or unit.symbol}"

    @staticmethod
    def _format_number(locale, value: float, unit: UnitDefinition, precision: Optional[int]) -> str:
        decimals = unit.decimals if precision is None else precision
        return format_decimal(value, format=number_pattern(decimals), locale=locale)
