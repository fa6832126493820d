"""Euclidian: straight-line distance.

d = √((x2-x1)² + (y2-y1)²)
"""

from __future__ import annotations

import math

from voronoi.engine.registry import metric


@metric(name="Euclidian", order=1, description="Straight-line distance")
def euclidian(x1: int, y1: int, x2: int, y2: int) -> float:
    delta_x_squared = (x2 - x1) ** 2
    delta_y_squared = (y2 - y1) ** 2
    return math.sqrt(delta_x_squared + delta_y_squared)
