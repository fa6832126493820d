"""Diagram configuration: static rendering constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DiagramConfig:
    """Controls how a diagram is colored and annotated."""

    # Site colors: every RGB channel is drawn from [intensity_min, intensity_max).
    # Brighter colors keep the black markers and caption readable.
    intensity_min: int = 128
    intensity_max: int = 256

    # Marker size grows with the image: ceil(sqrt(w*h) / divisor)
    dot_radius_divisor: int = 300

    # Caption
    font_size: int = 15
    caption_lines: int = 3

    @property
    def intensity_span(self) -> int:
        return self.intensity_max - self.intensity_min
