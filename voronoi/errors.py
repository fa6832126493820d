"""Error taxonomy shared by the engine and the driver."""

from __future__ import annotations


class VoronoiError(Exception):
    """Base class for every error raised on purpose by this package."""


class ConfigurationError(VoronoiError, ValueError):
    """Missing or invalid settings, or non-positive diagram dimensions."""


class ResourceError(VoronoiError, OSError):
    """Font loading, image encoding or file writing failed."""
