from __future__ import annotations

from babel.numbers import format_percent as _babel_format_percent


def format_percent(locale, value: float, digits: int = 0) -> str:
    """Render a 0-100 scale value with the locale's percent pattern.

    At most ``digits`` fraction digits are kept.
    """
    ratio = round(value / 100.0, digits + 2)
    return _babel_format_percent(ratio, locale=locale, decimal_quantization=False)
