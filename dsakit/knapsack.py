"""The fractional knapsack problem, solved greedily."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _ratio(value: float, weight: float) -> float:
    if weight == 0:
        if value == 0 or math.isnan(value):
            return math.nan
        return math.copysign(math.inf, value) * math.copysign(1.0, weight)
    return value / weight


def fractional_knapsack(
    weights: Sequence[float], values: Sequence[float], capacity: float
) -> float:
    """Return the largest value that fits within ``capacity``.

    Items may be taken in part. Items of zero weight follow IEEE float
    arithmetic, so they can make the result infinite or NaN.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    items = sorted(
        ((_ratio(v, w), w) for w, v in zip(weights, values)),
        key=lambda item: item[0],
        reverse=True,
    )
    total = 0.0
    for ratio, weight in items:
        if capacity <= 0:
            break
        take = min(weight, capacity)
        total += take * ratio
        capacity -= take
    return total