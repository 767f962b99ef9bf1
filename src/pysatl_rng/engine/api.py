"""
Random Engine API
=================

This module defines the capability the truncated samplers consume: a
pseudo-random stream together with the elementary distributions and the
special-function evaluations built on top of it.

Any object implementing :class:`RandomEngine` can be injected into the
samplers, which makes it easy to substitute a seeded engine for
reproducible runs or a counting/mock engine in tests.

Notes
-----
- An engine instance is a single stream and is not safe for concurrent use.
  Give every thread or worker its own engine.
- Only ``uniform``, ``exponential``, ``normal``, ``gamma_rate``, ``beta``
  and the CDF/log-gamma evaluations are relied upon by the samplers; the
  other draws complete the elementary facade.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomEngine(Protocol):
    """
    Protocol for pseudo-random engines.

    Every draw method returns a single Python ``float`` (``bernoulli``
    returns an ``int``).
    """

    def uniform(self) -> float:
        """Draw from ``U[0, 1)``."""
        ...

    def flat(self, a: float = 0.0, b: float = 1.0) -> float:
        """Draw from ``U[a, b)``."""
        ...

    def exponential(self, rate: float) -> float:
        """Draw from the exponential distribution with the given rate."""
        ...

    def exponential_mean(self, mean: float) -> float:
        """Draw from the exponential distribution with the given mean."""
        ...

    def normal(self, mean: float = 0.0, sd: float = 1.0) -> float:
        """Draw from ``N(mean, sd**2)``."""
        ...

    def gamma_scale(self, shape: float, scale: float) -> float:
        """Draw from ``Gamma(shape, scale)``, density ``x^(shape-1) exp(-x/scale)``."""
        ...

    def gamma_rate(self, shape: float, rate: float) -> float:
        """Draw from ``Gamma(shape, rate)``, density ``x^(shape-1) exp(-rate x)``."""
        ...

    def inverse_gamma(self, shape: float, scale: float) -> float:
        """Draw from ``IG(shape, scale)``, density ``x^(-shape-1) exp(-scale/x)``."""
        ...

    def beta(self, a: float = 1.0, b: float = 1.0) -> float:
        """Draw from ``Beta(a, b)``."""
        ...

    def chisq(self, df: float) -> float:
        """Draw from the chi-square distribution."""
        ...

    def bernoulli(self, p: float) -> int:
        """Draw ``1`` with probability ``p`` and ``0`` otherwise."""
        ...

    def normal_cdf(self, x: float, log: bool = False) -> float:
        """Standard normal CDF (or its logarithm)."""
        ...

    def gamma_cdf(self, x: float, shape: float, rate: float, log: bool = False) -> float:
        """Gamma CDF in the shape-rate parametrization (or its logarithm)."""
        ...

    def ln_gamma(self, x: float) -> float:
        """Natural logarithm of the Gamma function."""
        ...


__all__ = ["RandomEngine"]
