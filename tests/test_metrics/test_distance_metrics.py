"""Tests for the five distance metrics."""

from __future__ import annotations

import math

import numpy as np
import pytest

from voronoi.engine.metrics.canberra import canberra
from voronoi.engine.metrics.euclidian import euclidian
from voronoi.engine.metrics.fuzzy_euclidian import fuzzy_euclidian
from voronoi.engine.metrics.manhattan import manhattan
from voronoi.engine.metrics.minkowski import minkowski


class TestEuclidian:
    def test_three_four_five(self):
        assert euclidian(0, 0, 3, 4) == 5.0

    def test_symmetric(self):
        assert euclidian(7, -2, 1, 5) == euclidian(1, 5, 7, -2)

    def test_same_point_is_zero(self):
        assert euclidian(12, 34, 12, 34) == 0.0


class TestManhattan:
    def test_negative_delta(self):
        assert manhattan(0, 0, 3, -4) == 7

    def test_returns_float(self):
        assert isinstance(manhattan(1, 2, 3, 4), float)


class TestMinkowski:
    def test_unit_diagonal(self):
        assert minkowski(0, 0, 1, 1) == pytest.approx(2 ** (1 / 3))
        assert minkowski(0, 0, 1, 1) == pytest.approx(1.2599, abs=1e-4)

    def test_single_axis_matches_delta(self):
        assert minkowski(0, 0, 0, 8) == pytest.approx(8.0)

    def test_between_euclidian_and_chebyshev(self):
        d = minkowski(2, 3, 10, 9)
        assert max(8, 6) < d < euclidian(2, 3, 10, 9)


class TestCanberra:
    def test_origin_is_one(self):
        assert canberra(0, 0, 5, 5) == 1.0
        assert canberra(5, 5, 0, 0) == 1.0

    def test_diagonal_points(self):
        assert canberra(1, 1, 2, 2) == pytest.approx(2 / 3)

    def test_identical_points_is_zero(self):
        assert canberra(4, 9, 4, 9) == 0.0

    def test_zero_axis_sum_off_origin_is_nan(self):
        # x axis sums to 0 while neither point is the origin
        assert math.isnan(canberra(0, 1, 0, 2))
        assert math.isnan(canberra(3, 0, -3, 0))
        assert math.isnan(canberra(0, 5, 0, 7))
        assert math.isnan(canberra(5, 0, 7, 0))

    def test_opposite_signs_on_one_axis(self):
        # |(-2) - 2| / (2 + 2) == 1, y axis identical
        assert canberra(-2, 3, 2, 3) == 1.0


class TestFuzzyEuclidian:
    def test_offset_comes_from_injected_generator(self):
        expected_noise = np.random.default_rng(7).random() * 10
        d = fuzzy_euclidian(0, 0, 3, 4, rng=np.random.default_rng(7))
        assert d == 5.0 + expected_noise

    def test_offset_is_bounded(self):
        rng = np.random.default_rng(99)
        for _ in range(200):
            d = fuzzy_euclidian(0, 0, 3, 4, rng=rng)
            assert 5.0 <= d < 15.0

    def test_shared_generator_is_not_reseeded(self):
        rng = np.random.default_rng(5)
        first = fuzzy_euclidian(0, 0, 3, 4, rng=rng)
        second = fuzzy_euclidian(0, 0, 3, 4, rng=rng)
        assert first != second
