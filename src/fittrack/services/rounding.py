"""Half-up rounding used by the nutrition calculators."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going towards +infinity."""
    return math.floor(value + 0.5)


def round_one_decimal(value: float) -> float:
    """Round to one decimal place with half-up semantics."""
    return math.floor(value * 10 + 0.5) / 10
