"""Manhattan: taxicab distance, |Δx| + |Δy|."""

from __future__ import annotations

from voronoi.engine.registry import metric


@metric(name="Manhattan", order=3, description="Sum of absolute axis deltas")
def manhattan(x1: int, y1: int, x2: int, y2: int) -> float:
    return float(abs(x2 - x1) + abs(y2 - y1))
