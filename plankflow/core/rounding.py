"""Rounding shared by the calorie estimate and the weight unit conversion."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up.

    Python's built-in `round` rounds halves to even (2.5 -> 2); displayed
    figures here always round 2.5 up to 3.
    """
    return math.floor(value + 0.5)
