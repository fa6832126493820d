"""Canberra: weighted Manhattan distance.

d = |x1-x2| / (|x1|+|x2|) + |y1-y2| / (|y1|+|y2|)

Either point at the origin gives 1.0. An axis whose coordinates are both zero
(off the origin) divides 0 by 0: the term is NaN, as in IEEE float division,
and the NaN is returned to the caller rather than raised.
"""

from __future__ import annotations

import math

from voronoi.engine.registry import metric


def _axis_term(a: int, b: int) -> float:
    # |a| + |b| is zero only when a == b == 0, so the only zero division is 0/0
    denominator = abs(a) + abs(b)
    if denominator == 0:
        return math.nan
    return abs(a - b) / denominator


@metric(name="Canberra", order=4, description="Weighted Manhattan distance")
def canberra(x1: int, y1: int, x2: int, y2: int) -> float:
    if (x1 == 0 and y1 == 0) or (x2 == 0 and y2 == 0):
        return 1.0

    distance = 0.0
    distance += _axis_term(x1, x2)
    distance += _axis_term(y1, y2)
    return distance
