"""Metric registry: every distance metric is a standalone function registered via decorator.

Usage:
    @metric(name="Manhattan", order=3, description="Sum of absolute axis deltas")
    def manhattan(x1: int, y1: int, x2: int, y2: int) -> float:
        return float(abs(x2 - x1) + abs(y2 - y1))

Adding a new metric = creating one file in ``voronoi.engine.metrics`` with the decorator.
The registered name is what the caption and the output file name show.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

logger = logging.getLogger(__name__)

MetricFn = Callable[[int, int, int, int], float]


@dataclass(frozen=True)
class Metric:
    """A distance function paired with its display name."""

    name: str
    apply: MetricFn
    # False when repeated calls with the same arguments may differ
    deterministic: bool = True

    def __call__(self, x1: int, y1: int, x2: int, y2: int) -> float:
        return self.apply(x1, y1, x2, y2)


@dataclass
class MetricSpec:
    name: str
    fn: Callable[..., float]
    order: int
    # The function takes a keyword-only ``rng`` (numpy Generator)
    needs_rng: bool = False
    description: str = ""

    def bind(self, rng: np.random.Generator | None = None) -> Metric:
        """Return the callable metric, wiring in the random source if needed."""
        if not self.needs_rng:
            return Metric(name=self.name, apply=self.fn)
        if rng is None:
            raise ValueError(f"Metric {self.name} needs a random source")
        return Metric(
            name=self.name,
            apply=functools.partial(self.fn, rng=rng),
            deterministic=False,
        )


class MetricRegistry:
    """Singleton registry of all metrics."""

    def __init__(self) -> None:
        self._metrics: dict[str, MetricSpec] = {}

    def register(self, spec: MetricSpec) -> None:
        if spec.name in self._metrics:
            raise ValueError(f"Duplicate metric name: {spec.name}")
        self._metrics[spec.name] = spec
        logger.debug("Registered metric %s (order %d)", spec.name, spec.order)

    def get(self, name: str) -> MetricSpec:
        return self._metrics[name]

    def all(self) -> list[MetricSpec]:
        return sorted(self._metrics.values(), key=lambda s: (s.order, s.name))

    def build(self, rng: np.random.Generator | None = None) -> list[Metric]:
        """Bind every registered metric, in driver order, to the given random source."""
        return [spec.bind(rng) for spec in self.all()]

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.all()]

    @property
    def count(self) -> int:
        return len(self._metrics)


# Module-level singleton
_registry = MetricRegistry()


def get_registry() -> MetricRegistry:
    return _registry


def metric(
    *,
    name: str,
    order: int,
    needs_rng: bool = False,
    description: str = "",
):
    """Decorator to register a metric function."""

    def decorator(fn: Callable[..., float]):
        spec = MetricSpec(
            name=name,
            fn=fn,
            order=order,
            needs_rng=needs_rng,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
