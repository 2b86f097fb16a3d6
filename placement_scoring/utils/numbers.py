"""
Numeric helpers shared by every scorer.

Python's round() uses banker's rounding (round(2.5) == 2). Scores in the
portal have always been rounded half-up, so all scorers go through
round_half_up() instead.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))
