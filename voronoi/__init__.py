"""Brute-force Voronoi diagram generator with pluggable distance metrics."""

__version__ = "0.1.0"
