from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special, stats

from pysatl_rng.special import beta_function, beta_pdf, gamma_function


class TestGammaFunction:
    @pytest.mark.parametrize("x, expected", [(1.0, 1.0), (5.0, 24.0), (0.5, math.sqrt(math.pi))])
    def test_values(self, x, expected) -> None:
        assert gamma_function(x) == pytest.approx(expected)

    def test_log(self) -> None:
        assert gamma_function(200.0, log=True) == pytest.approx(math.lgamma(200.0))

    def test_log_avoids_overflow(self) -> None:
        assert math.isfinite(gamma_function(500.0, log=True))

    @pytest.mark.parametrize(
        "x, expected",
        [(-0.5, -2.0 * math.sqrt(math.pi)), (-1.5, 4.0 / 3.0 * math.sqrt(math.pi))],
    )
    def test_negative_arguments_keep_sign(self, x, expected) -> None:
        assert gamma_function(x) == pytest.approx(expected)
        assert gamma_function(x, log=True) == pytest.approx(math.log(abs(expected)))


class TestBetaFunction:
    @pytest.mark.parametrize("a, b", [(1.0, 1.0), (2.0, 3.0), (0.5, 0.5), (40.0, 70.0)])
    def test_matches_scipy(self, a, b) -> None:
        assert beta_function(a, b) == pytest.approx(float(special.beta(a, b)))
        assert beta_function(a, b, log=True) == pytest.approx(float(special.betaln(a, b)))

    def test_symmetry(self) -> None:
        assert beta_function(2.5, 7.0) == pytest.approx(beta_function(7.0, 2.5))

    def test_log_for_large_arguments(self) -> None:
        assert beta_function(1e4, 1e4, log=True) == pytest.approx(
            float(special.betaln(1e4, 1e4))
        )


class TestBetaPdf:
    @pytest.mark.parametrize("x", [0.01, 0.3, 0.5, 0.99])
    @pytest.mark.parametrize("a, b", [(2.0, 5.0), (0.5, 0.5), (1.0, 1.0)])
    def test_matches_scipy(self, x, a, b) -> None:
        assert beta_pdf(x, a, b) == pytest.approx(stats.beta(a, b).pdf(x))

    def test_outside_support(self) -> None:
        assert beta_pdf(-0.1, 2.0, 2.0) == 0.0
        assert beta_pdf(1.1, 2.0, 2.0) == 0.0

    def test_boundaries(self) -> None:
        assert beta_pdf(0.0, 2.0, 2.0) == 0.0
        assert beta_pdf(0.0, 0.5, 2.0) == math.inf
        assert beta_pdf(0.0, 1.0, 3.0) == pytest.approx(3.0)
        assert beta_pdf(1.0, 3.0, 1.0) == pytest.approx(3.0)
