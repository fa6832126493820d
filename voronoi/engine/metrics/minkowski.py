"""Minkowski: generalized p-norm distance, here with p = 3.

d = (|Δx|^p + |Δy|^p)^(1/p). p=1 is Manhattan, p=2 is Euclidian.
"""

from __future__ import annotations

from voronoi.engine.registry import metric

_P = 3.0


@metric(name="Minkowski", order=2, description="p-norm distance with p=3")
def minkowski(x1: int, y1: int, x2: int, y2: int) -> float:
    distance = abs(x2 - x1) ** _P + abs(y2 - y1) ** _P
    return distance ** (1.0 / _P)
