"""Numeric helpers shared by the fingerprint components."""

import math
from typing import Any, Optional


def finite_or(value: Any, default: float) -> float:
    """Return ``value`` as a float, or ``default`` if it is NaN/Infinity."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(value) or math.isinf(value):
        return default
    return value


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp to [low, high].
    
    NaN maps to ``low``; infinities map to the matching bound.
    """
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.
    
    Python's built-in ``round`` uses banker's rounding, so 7.5 and 8.5
    would both become 8. Here 7.5 -> 8 and -7.5 -> -8.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def as_optional_number(value: Any) -> Optional[float]:
    """Coerce loosely-typed numeric input; non-numeric or non-finite -> None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
