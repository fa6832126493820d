"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from voronoi.errors import ConfigurationError


class Settings(BaseSettings):
    # Where the PNGs are written; no default, the directory must already exist
    output_dir: Path
    # TrueType font used for the caption
    font_path: Path

    width: int = Field(default=500, gt=0)
    height: int = Field(default=500, gt=0)
    site_count: int = Field(default=20, gt=0)
    draw_sites: bool = True

    # Session seed; picked from the clock when unset
    seed: int | None = None

    log_level: str = "info"

    model_config = {"env_prefix": "VORONOI_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("output_dir")
    @classmethod
    def _output_dir_exists(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"output directory does not exist: {value}")
        return value

    @field_validator("font_path")
    @classmethod
    def _font_is_truetype_file(cls, value: Path) -> Path:
        if value.suffix.lower() != ".ttf":
            raise ValueError(f"font must be a .ttf file: {value}")
        if not value.is_file():
            raise ValueError(f"font file not found: {value}")
        return value


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, failing with ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration:\n{e}") from e
