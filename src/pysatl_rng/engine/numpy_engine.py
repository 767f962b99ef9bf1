"""
NumPy Random Engine
===================

Default :class:`~pysatl_rng.engine.api.RandomEngine` implementation backed by
a :class:`numpy.random.Generator` over the Mersenne Twister bit generator and
by :mod:`scipy.special` for CDF and log-gamma evaluations.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
from scipy.special import gammainc, gammaln, log_ndtr, ndtr

_SMALLEST_RELIABLE_CDF = 1e-300
"""Below this value ``gammainc`` has lost relative precision or underflowed."""


def log_lower_gamma_series(shape: float, z: float) -> float:
    """
    Logarithm of the regularized lower incomplete gamma ``P(shape, z)``.

    Uses the power series

    ``P(a, z) = z**a exp(-z) / Γ(a + 1) * sum_j z**j / ((a + 1) ... (a + j))``

    accumulated in log space, so the result stays finite when ``P`` itself
    underflows (large ``shape`` relative to ``z``).

    Parameters
    ----------
    shape : float
        Shape ``a > 0``.
    z : float
        Argument ``z > 0``.

    Returns
    -------
    float
        ``ln P(shape, z)``.
    """
    log_z = math.log(z)
    log_term = 0.0
    log_sum = 0.0
    j = 0
    while True:
        j += 1
        log_term += log_z - math.log(shape + j)
        log_sum += math.log1p(math.exp(log_term - log_sum))
        # terms decrease geometrically once shape + j > z
        if shape + j > z and log_term < log_sum - 40.0:
            break
    return shape * log_z - z - float(gammaln(shape + 1.0)) + log_sum


class NumPyRandomEngine:
    """
    Random engine over ``numpy.random.Generator(MT19937)``.

    Parameters
    ----------
    seed : int | numpy.random.SeedSequence | None, optional
        Seed of the stream. If ``None``, fresh OS entropy is used.

    Attributes
    ----------
    generator : numpy.random.Generator
        Underlying generator. Draws made directly on it advance the same stream.

    Notes
    -----
    - One engine is one stream. It is not safe to share an engine between
      threads; use :meth:`spawn` to derive independent engines instead.
    - The exact bit stream depends on NumPy's distribution algorithms, so
      seeded runs are reproducible for a given NumPy version only.
    """

    def __init__(self, seed: int | np.random.SeedSequence | None = None) -> None:
        self._seed_seq = (
            seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
        )
        self.generator = np.random.Generator(np.random.MT19937(self._seed_seq))

    def reseed(self, seed: int | None = None) -> None:
        """
        Restart the stream from ``seed``.

        Parameters
        ----------
        seed : int or None, optional
            New seed. If ``None``, fresh OS entropy is used.
        """
        self._seed_seq = np.random.SeedSequence(seed)
        self.generator = np.random.Generator(np.random.MT19937(self._seed_seq))

    def spawn(self, n: int) -> list[NumPyRandomEngine]:
        """
        Derive ``n`` statistically independent child engines.

        Parameters
        ----------
        n : int
            Number of children, one per thread or worker.

        Returns
        -------
        list[NumPyRandomEngine]
            Independent engines seeded from this engine's seed sequence.
        """
        if n < 0:
            raise ValueError(f"Number of engines must be non-negative, got {n}")
        return [NumPyRandomEngine(child) for child in self._seed_seq.spawn(n)]

    # ------------------------------------------------------------------ #
    # Random variates
    # ------------------------------------------------------------------ #

    def uniform(self) -> float:
        return float(self.generator.random())

    def flat(self, a: float = 0.0, b: float = 1.0) -> float:
        return float(self.generator.uniform(a, b))

    def exponential(self, rate: float) -> float:
        return self.exponential_mean(1.0 / rate)

    def exponential_mean(self, mean: float) -> float:
        return float(self.generator.exponential(mean))

    def normal(self, mean: float = 0.0, sd: float = 1.0) -> float:
        return mean + sd * float(self.generator.standard_normal())

    def gamma_scale(self, shape: float, scale: float) -> float:
        return float(self.generator.gamma(shape, scale))

    def gamma_rate(self, shape: float, rate: float) -> float:
        return self.gamma_scale(shape, 1.0 / rate)

    def inverse_gamma(self, shape: float, scale: float) -> float:
        # 1/x ~ Gamma(shape, scale=1/scale)
        return 1.0 / self.gamma_scale(shape, 1.0 / scale)

    def beta(self, a: float = 1.0, b: float = 1.0) -> float:
        return float(self.generator.beta(a, b))

    def chisq(self, df: float) -> float:
        return float(self.generator.chisquare(df))

    def bernoulli(self, p: float) -> int:
        return int(self.generator.random() < p)

    # ------------------------------------------------------------------ #
    # Distribution functions
    # ------------------------------------------------------------------ #

    def normal_cdf(self, x: float, log: bool = False) -> float:
        if log:
            return float(log_ndtr(x))
        return float(ndtr(x))

    def gamma_cdf(self, x: float, shape: float, rate: float, log: bool = False) -> float:
        p = float(gammainc(shape, rate * x))
        if not log:
            return p
        if p >= _SMALLEST_RELIABLE_CDF:
            return math.log(p)
        if x <= 0:
            return -math.inf
        return log_lower_gamma_series(shape, rate * x)

    def ln_gamma(self, x: float) -> float:
        return float(gammaln(x))


__all__ = ["NumPyRandomEngine"]
