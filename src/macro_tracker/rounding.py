"""Rounding helpers that send halves towards positive infinity."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` decimals; 2.25 -> 2.3, -2.25 -> -2.2."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round to the nearest integer, sending .5 upwards."""
    return math.floor(value + 0.5)
