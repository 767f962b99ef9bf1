"""
Core Type Definitions
=====================

Numeric aliases and the small value types passed between the samplers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from dataclasses import dataclass
from math import inf
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pysatl_rng.errors import InvalidParameterError

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for arrays of draws."""

ScalarSampler = Callable[..., float]
"""Type alias for a scalar sampling callable (parameters -> one draw)."""

InterruptCheck = Callable[[int], None]
"""Cooperative cancellation hook, called with the current iteration count."""


@dataclass(frozen=True, slots=True)
class Interval:
    """
    Truncation interval ``[left, right]`` on the real line.

    Parameters
    ----------
    left : float
        Left endpoint.
    right : float, default=inf
        Right endpoint; ``inf`` means one-sided truncation.
    """

    left: float
    right: float = inf

    @property
    def is_one_sided(self) -> bool:
        return self.right == inf

    @property
    def width(self) -> float:
        return self.right - self.left

    def validate(self) -> "Interval":
        """
        Check that the interval is well formed.

        Returns
        -------
        Interval
            ``self``, for chaining.

        Raises
        ------
        InvalidParameterError
            If a bound is NaN, ``left = +inf``, ``right = -inf`` or
            ``right < left``.
        """
        if math.isnan(self.left) or math.isnan(self.right):
            raise InvalidParameterError(
                f"NaN truncation bound: left={self.left}, right={self.right}"
            )
        if self.left == inf or self.right == -inf:
            raise InvalidParameterError(
                f"Truncation interval has no finite mass: left={self.left}, right={self.right}"
            )
        if self.right < self.left:
            raise InvalidParameterError(
                f"Truncation interval is empty: left={self.left}, right={self.right}"
            )
        return self

    def contains(self, x: float) -> bool:
        """Check if ``x`` lies in the closed interval."""
        return self.left <= x <= self.right

    def __contains__(self, x: object) -> bool:
        return self.contains(float(x))  # type: ignore[arg-type]

    def reflected(self) -> "Interval":
        """Mirror image ``[-right, -left]``."""
        return Interval(-self.right, -self.left)


@dataclass(frozen=True, slots=True)
class LocationScale:
    """
    Location-scale parameters of a shifted normal.

    Parameters
    ----------
    mu : float
        Location.
    sd : float
        Scale, must be positive.
    """

    mu: float = 0.0
    sd: float = 1.0

    def __post_init__(self) -> None:
        if math.isnan(self.mu) or math.isnan(self.sd):
            raise InvalidParameterError(f"NaN location-scale: mu={self.mu}, sd={self.sd}")
        if not self.sd > 0:
            raise InvalidParameterError(f"sd must be positive, got {self.sd}")

    def standardize(self, x: float) -> float:
        return (x - self.mu) / self.sd

    def destandardize(self, z: float) -> float:
        return self.mu + self.sd * z

    def standardize_interval(self, interval: Interval) -> Interval:
        return Interval(self.standardize(interval.left), self.standardize(interval.right))


@dataclass(frozen=True, slots=True)
class GammaParameters:
    """
    Shape-rate parameters of a gamma distribution.

    Parameters
    ----------
    shape : float
        Shape ``a > 0``.
    rate : float
        Rate ``b > 0``.
    """

    shape: float
    rate: float

    def __post_init__(self) -> None:
        if not 0 < self.shape < inf:
            raise InvalidParameterError(f"shape must be positive and finite, got {self.shape}")
        if not 0 < self.rate < inf:
            raise InvalidParameterError(f"rate must be positive and finite, got {self.rate}")

    @property
    def scale(self) -> float:
        return 1.0 / self.rate

    def normalized(self, right_t: float) -> "GammaParameters":
        """
        Parameters of ``Y = X / right_t`` when ``X`` is truncated at ``right_t``.

        ``Y`` is then truncated at 1 with rate ``rate * right_t``.
        """
        if not 0 < right_t < inf:
            raise InvalidParameterError(
                f"truncation point must be positive and finite, got {right_t}"
            )
        return GammaParameters(self.shape, self.rate * right_t)


__all__ = [
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ScalarSampler",
    "InterruptCheck",
    "Interval",
    "LocationScale",
    "GammaParameters",
]
