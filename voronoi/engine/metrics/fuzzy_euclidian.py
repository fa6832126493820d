"""FuzzyEuclidian: Euclidian distance plus uniform noise.

d = euclidian + U(0, 1) · fuzziness

The noise comes from an injected generator that is independent of the site
seed, so cell borders come out ragged and differ on every render.
"""

from __future__ import annotations

import numpy as np

from voronoi.engine.metrics.euclidian import euclidian
from voronoi.engine.registry import metric

# Roughly the pixel width of the ragged border. Sites very close to each
# other can show wider fuzz.
_FUZZINESS = 10


@metric(
    name="FuzzyEuclidian",
    order=0,
    needs_rng=True,
    description="Euclidian distance with uniform noise",
)
def fuzzy_euclidian(x1: int, y1: int, x2: int, y2: int, *, rng: np.random.Generator) -> float:
    distance = euclidian(x1, y1, x2, y2)
    distance += float(rng.random()) * _FUZZINESS
    return distance
