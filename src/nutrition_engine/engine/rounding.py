"""Rounding helpers shared by the engine."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals with halves rounded up (2.5 -> 3).

    Unlike round(), which rounds halves to even.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_whole(value: float) -> int:
    """Round half up to an int."""
    return int(round_half_up(value))
