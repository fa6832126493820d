"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import ImageFont

# Import all metrics to trigger registration
import voronoi.engine.metrics.canberra
import voronoi.engine.metrics.euclidian
import voronoi.engine.metrics.fuzzy_euclidian
import voronoi.engine.metrics.manhattan
import voronoi.engine.metrics.minkowski

from voronoi.engine.registry import Metric, get_registry


@pytest.fixture
def font():
    return ImageFont.load_default()


@pytest.fixture
def fuzz_rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def metrics(fuzz_rng) -> dict[str, Metric]:
    return {m.name: m for m in get_registry().build(fuzz_rng)}


@pytest.fixture
def manhattan(metrics) -> Metric:
    return metrics["Manhattan"]


@pytest.fixture
def fake_font_file(tmp_path):
    """A file that passes settings validation but is not a usable font."""
    path = tmp_path / "caption.ttf"
    path.write_bytes(b"")
    return path


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Drop VORONOI_* variables and any .env so settings come only from the test."""
    for key in ("OUTPUT_DIR", "FONT_PATH", "WIDTH", "HEIGHT", "SITE_COUNT", "DRAW_SITES", "SEED", "LOG_LEVEL"):
        monkeypatch.delenv(f"VORONOI_{key}", raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
