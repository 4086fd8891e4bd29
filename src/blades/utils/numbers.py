"""Lenient numeric parsing for values that come from sheets and dialog forms."""

import math
from typing import Any


def to_number(value: Any, default: float | None = 0) -> float | None:
    """
    Parses a value as a finite number.
    None, blank strings, booleans, NaN/inf and anything unparsable give `default`.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def to_int(value: Any, default: int = 0) -> int:
    """Like to_number, truncated towards zero. e.g. "2" -> 2, "2.7" -> 2, "x" -> 0"""
    number = to_number(value, default)
    return int(number)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))
