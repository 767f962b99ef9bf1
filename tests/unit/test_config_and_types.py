from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from math import inf, nan

import pytest

from pysatl_rng.config import DEFAULT_CONFIG, SamplerConfig
from pysatl_rng.errors import InvalidParameterError, IterationLimitExceededError
from pysatl_rng.types import GammaParameters, Interval, LocationScale


class TestSamplerConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.direct_rejection_threshold == 0.95
        assert DEFAULT_CONFIG.progress_interval == 100_000
        assert DEFAULT_CONFIG.max_iterations is None
        assert DEFAULT_CONFIG.interrupt_check is None

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.max_iterations = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"direct_rejection_threshold": -0.1},
            {"direct_rejection_threshold": 1.5},
            {"progress_interval": 0},
            {"max_iterations": 0},
        ],
    )
    def test_validation(self, kwargs) -> None:
        with pytest.raises(ValueError):
            SamplerConfig(**kwargs)


class TestInterval:
    def test_one_sided(self) -> None:
        interval = Interval(1.0)
        assert interval.is_one_sided
        assert interval.width == inf
        assert 5.0 in interval

    def test_validate_returns_self(self) -> None:
        interval = Interval(-1.0, 2.0)
        assert interval.validate() is interval

    @pytest.mark.parametrize(
        "left, right", [(2.0, 1.0), (nan, 1.0), (0.0, nan), (inf, inf), (-inf, -inf)]
    )
    def test_validate_rejects(self, left, right) -> None:
        with pytest.raises(InvalidParameterError):
            Interval(left, right).validate()

    def test_reflected(self) -> None:
        assert Interval(-5.0, -2.0).reflected() == Interval(2.0, 5.0)

    def test_contains_is_closed(self) -> None:
        interval = Interval(0.0, 1.0)
        assert interval.contains(0.0)
        assert interval.contains(1.0)
        assert not interval.contains(1.0 + 1e-12)


class TestLocationScale:
    def test_round_trip(self) -> None:
        ls = LocationScale(3.0, 2.0)
        assert ls.standardize(7.0) == 2.0
        assert ls.destandardize(2.0) == 7.0
        assert ls.standardize_interval(Interval(1.0, 5.0)) == Interval(-1.0, 1.0)

    @pytest.mark.parametrize("mu, sd", [(0.0, 0.0), (0.0, -2.0), (nan, 1.0), (0.0, nan)])
    def test_rejects(self, mu, sd) -> None:
        with pytest.raises(InvalidParameterError):
            LocationScale(mu, sd)


class TestGammaParameters:
    def test_normalized(self) -> None:
        params = GammaParameters(2.0, 1.5).normalized(3.0)
        assert params == GammaParameters(2.0, 4.5)
        assert params.scale == pytest.approx(1.0 / 4.5)

    @pytest.mark.parametrize(
        "shape, rate", [(0.0, 1.0), (1.0, -1.0), (nan, 1.0), (inf, 1.0), (1.0, inf)]
    )
    def test_rejects(self, shape, rate) -> None:
        with pytest.raises(InvalidParameterError):
            GammaParameters(shape, rate)

    @pytest.mark.parametrize("right", [0.0, -1.0, nan, inf])
    def test_rejects_truncation_point(self, right) -> None:
        with pytest.raises(InvalidParameterError):
            GammaParameters(1.0, 1.0).normalized(right)


class TestErrors:
    def test_iteration_limit_message(self) -> None:
        err = IterationLimitExceededError("tnorm(left, right)", 10)
        assert err.iterations == 10
        assert err.sampler == "tnorm(left, right)"
        assert "10 iterations" in str(err)
        assert isinstance(err, RuntimeError)
