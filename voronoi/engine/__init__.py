"""Voronoi diagram engine."""

from voronoi.engine.registry import Metric, get_registry, metric
from voronoi.engine.sites import Site, SiteColor, generate_sites
from voronoi.engine.renderer import assign_cells, load_font, render

__all__ = [
    "metric",
    "Metric",
    "get_registry",
    "Site",
    "SiteColor",
    "generate_sites",
    "assign_cells",
    "load_font",
    "render",
]
