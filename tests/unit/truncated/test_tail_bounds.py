from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_rng.truncated.tail_bounds import (
    SQRT_2PI,
    exponential_regime_lower_bound,
    optimal_tilt,
)


class TestTailBounds:
    def test_optimal_tilt_at_zero(self) -> None:
        assert optimal_tilt(0.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("left", [0.0, 0.5, 1.0, 3.0, 10.0, 1e3])
    def test_optimal_tilt_solves_quadratic(self, left: float) -> None:
        """astar is the positive root of a**2 - left*a - 1 = 0."""
        astar = optimal_tilt(left)
        assert astar > left
        assert astar * astar - left * astar - 1.0 == pytest.approx(0.0, abs=1e-9 * max(1, left**2))

    def test_optimal_tilt_approaches_left_in_far_tail(self) -> None:
        left = 1e6
        assert optimal_tilt(left) - left == pytest.approx(1.0 / left, rel=1e-3)

    @pytest.mark.parametrize("left", [1.3e154, 1e200, 1e308])
    def test_optimal_tilt_does_not_overflow(self, left: float) -> None:
        astar = optimal_tilt(left)
        assert math.isfinite(astar)
        assert astar == pytest.approx(left)
        assert math.isfinite(exponential_regime_lower_bound(left))

    def test_lower_bound_closed_form(self) -> None:
        left = 1.5
        astar = 0.5 * (left + math.sqrt(left**2 + 4))
        expected = left + math.exp(0.5 * left * (left - astar) + 0.5)
        assert exponential_regime_lower_bound(left) == pytest.approx(expected)

    def test_lower_bound_at_zero(self) -> None:
        assert exponential_regime_lower_bound(0.0) == pytest.approx(math.exp(0.5))

    @pytest.mark.parametrize("left", [0.0, 1.0, 5.0, 50.0])
    def test_lower_bound_exceeds_left(self, left: float) -> None:
        assert exponential_regime_lower_bound(left) > left

    def test_nan_propagates(self) -> None:
        assert math.isnan(optimal_tilt(math.nan))
        assert math.isnan(exponential_regime_lower_bound(math.nan))

    def test_sqrt_2pi(self) -> None:
        assert pytest.approx(2.50662827) == SQRT_2PI
