"""Site generation: seeded random site positions and their cell colors.

Per site index the stream is consumed in the order x, y, r, g, b, so the same
seed always lays out the same diagram. Streams come from numpy's default
generator; layouts are reproducible within this package only, not across
other Voronoi implementations that happen to share a seed.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from voronoi.engine.config import DiagramConfig
from voronoi.errors import ConfigurationError


@dataclass(frozen=True)
class Site:
    """A site position in image pixel coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class SiteColor:
    r: int
    g: int
    b: int

    def as_rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, 255)


def validate_dimensions(width: int, height: int, site_count: int) -> None:
    for label, value in (("width", width), ("height", height), ("site_count", site_count)):
        if value <= 0:
            raise ConfigurationError(f"{label} must be positive, got {value}")


def generate_sites(
    seed: int,
    width: int,
    height: int,
    site_count: int,
    config: DiagramConfig | None = None,
) -> tuple[list[Site], list[SiteColor]]:
    """Place ``site_count`` sites uniformly in the image and pick a color for each."""
    config = config or DiagramConfig()
    validate_dimensions(width, height, site_count)

    rng = np.random.default_rng(seed)
    span = config.intensity_span
    low = config.intensity_min

    sites: list[Site] = []
    colors: list[SiteColor] = []
    for _ in range(site_count):
        x = int(rng.integers(width))
        y = int(rng.integers(height))
        sites.append(Site(x, y))

        r = int(rng.integers(span)) + low
        g = int(rng.integers(span)) + low
        b = int(rng.integers(span)) + low
        colors.append(SiteColor(r, g, b))

    return sites, colors


def color_table(colors: list[SiteColor]) -> NDArray[np.uint8]:
    """Nx4 RGBA lookup table indexed by site index."""
    return np.array([c.as_rgba() for c in colors], dtype=np.uint8).reshape(-1, 4)
