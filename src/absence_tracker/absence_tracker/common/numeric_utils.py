from __future__ import annotations

import math
from typing import Any


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _to_float(value: Any) -> float:
    if isinstance(value, str) and "_" in value:
        # float() accepts digit separators; stored and typed numbers never carry them.
        raise ValueError(f"not a plain number: {value!r}")
    return _finite_or_zero(float(value))


def parse_decimal(value: Any) -> float:
    """Parse user input that may use ',' or '.' as decimal separator.

    Numbers pass through; ``None``, blank, unparseable or non-finite input
    (including integers too large for a float) becomes 0.
    """

    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        try:
            return _to_float(value)
        except OverflowError:
            return 0.0

    normalized = str(value).replace(",", ".", 1)
    try:
        return _to_float(normalized)
    except (ValueError, OverflowError):
        return 0.0


def coerce_number(value: Any) -> float:
    """Lenient number coercion for stored data (no comma handling)."""

    try:
        return _to_float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0


def clamp_non_negative(value: float) -> float:
    return max(0.0, value)
