"""Diagram renderer: brute-force nearest-site coloring, site markers, caption, PNG output.

Every pixel is compared against every site (O(width · height · sites)). Pixels
and sites are both shifted by half the image size before the metric sees them;
markers are drawn at the raw site coordinates.
"""

from __future__ import annotations

import logging
import math
import sys
import time
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont

from voronoi.engine.config import DiagramConfig
from voronoi.engine.registry import Metric
from voronoi.engine.sites import Site, color_table, generate_sites
from voronoi.errors import ResourceError

logger = logging.getLogger(__name__)

_BLACK = (0, 0, 0, 255)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def load_font(font_path: str | Path, size: int) -> Font:
    """Load a TrueType font at the given point size."""
    try:
        return ImageFont.truetype(str(font_path), size)
    except OSError as e:
        raise ResourceError(f"Could not load font {font_path}: {e}") from e


def dot_radius(width: int, height: int, divisor: int = 300) -> int:
    """Marker half-size; grows with the image so dots stay visible when zoomed out."""
    return math.ceil(math.sqrt(width * height) / divisor)


def assign_cells(
    sites: list[Site],
    width: int,
    height: int,
    metric: Metric,
) -> NDArray[np.intp]:
    """Return a (height, width) grid holding the index of each pixel's nearest site.

    Raster order is fixed (rows, then columns, then sites) so a metric that
    draws random numbers consumes them in a reproducible order. Ties and NaN
    distances keep the earlier site.
    """
    half_w = width // 2
    half_h = height // 2
    shifted = [(site.x + half_w, site.y + half_h) for site in sites]

    owners = np.zeros((height, width), dtype=np.intp)
    for y in range(height):
        pixel_y = y + half_h
        for x in range(width):
            pixel_x = x + half_w

            smallest_dist = sys.float_info.max
            closest_idx = 0
            for i, (site_x, site_y) in enumerate(shifted):
                distance = metric(pixel_x, pixel_y, site_x, site_y)
                if distance < smallest_dist:
                    smallest_dist = distance
                    closest_idx = i
            owners[y, x] = closest_idx
    return owners


def draw_site_markers(
    pixels: NDArray[np.uint8],
    sites: list[Site],
    width: int,
    height: int,
    divisor: int = 300,
) -> None:
    """Paint a black square around each site, in place.

    Row and column 0 are never painted; the clip is 0 < x < width, 0 < y < height.
    """
    radius = dot_radius(width, height, divisor)
    for site in sites:
        for x in range(site.x - radius, site.x + radius + 1):
            for y in range(site.y - radius, site.y + radius + 1):
                if 0 < x < width and 0 < y < height:
                    pixels[y, x] = _BLACK


def caption_text(site_count: int, width: int, height: int, metric_name: str) -> str:
    return "\n".join([
        f"Sites: {site_count}",
        f"Resolution: {width}, {height}",
        f"Metric: {metric_name}",
    ])


def draw_caption(
    image: Image.Image,
    text: str,
    font: Font,
    config: DiagramConfig | None = None,
) -> None:
    """Draw the caption in black, anchored to the bottom-left corner."""
    config = config or DiagramConfig()
    text_height = config.font_size * config.caption_lines
    draw = ImageDraw.Draw(image)
    draw.text((0, image.height - text_height), text, fill=_BLACK, font=font)


def render_image(
    metric: Metric,
    seed: int,
    width: int = 500,
    height: int = 500,
    site_count: int = 20,
    draw_sites: bool = True,
    *,
    font: Font,
    config: DiagramConfig | None = None,
) -> Image.Image:
    """Build the annotated diagram in memory."""
    config = config or DiagramConfig()
    sites, colors = generate_sites(seed, width, height, site_count, config)

    owners = assign_cells(sites, width, height, metric)
    pixels = color_table(colors)[owners]

    if draw_sites:
        draw_site_markers(pixels, sites, width, height, config.dot_radius_divisor)

    image = Image.fromarray(pixels)
    draw_caption(image, caption_text(site_count, width, height, metric.name), font, config)
    return image


def render(
    path: str | Path,
    metric: Metric,
    seed: int,
    width: int = 500,
    height: int = 500,
    site_count: int = 20,
    draw_sites: bool = True,
    *,
    font: Font,
    config: DiagramConfig | None = None,
) -> Path:
    """Render one diagram and save it as a PNG at ``path``."""
    path = Path(path)
    t0 = time.perf_counter()

    image = render_image(
        metric, seed, width, height, site_count, draw_sites, font=font, config=config,
    )
    try:
        image.save(path, format="PNG")
    except OSError as e:
        raise ResourceError(f"Could not write {path}: {e}") from e
    finally:
        image.close()

    elapsed = (time.perf_counter() - t0) * 1000
    logger.debug(
        "Rendered %s (%dx%d, %d sites) in %.0fms",
        metric.name,
        width,
        height,
        site_count,
        elapsed,
    )
    return path
