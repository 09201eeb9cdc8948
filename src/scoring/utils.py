"""Rounding, clamping and averaging shared by the scorers."""

from __future__ import annotations

import math
from collections.abc import Iterable


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def average(values: Iterable[int]) -> int:
    """Rounded mean of *values*; ``0`` for an empty input."""
    items = list(values)
    if not items:
        return 0
    return round_half_up(sum(items) / len(items))
