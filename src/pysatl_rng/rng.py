"""
RNG Facade
==========

:class:`RNG` bundles one random engine with the truncated samplers built on
it. It composes the engine instead of extending it: the elementary draws stay
on :attr:`RNG.engine`, while the facade adds the truncated normal and
right-truncated gamma samplers and the Gamma/Beta function helpers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf
from typing import TYPE_CHECKING

from pysatl_rng.config import DEFAULT_CONFIG, SamplerConfig
from pysatl_rng.engine.numpy_engine import NumPyRandomEngine
from pysatl_rng.special import beta_function, gamma_function
from pysatl_rng.truncated.gamma import RightTruncatedGammaSampler
from pysatl_rng.truncated.normal import TruncatedNormalSampler

if TYPE_CHECKING:
    from pysatl_rng.engine.api import RandomEngine


class RNG:
    """
    Random variate generator for MCMC samplers.

    Parameters
    ----------
    engine : RandomEngine, optional
        Engine to draw from. If ``None``, a :class:`NumPyRandomEngine` seeded
        with ``seed`` is created.
    config : SamplerConfig, optional
        Configuration shared by both truncated samplers.
    seed : int, optional
        Seed for the default engine. Ignored when ``engine`` is given.

    Attributes
    ----------
    engine : RandomEngine
        The underlying stream and elementary distributions.
    truncated_normal : TruncatedNormalSampler
    truncated_gamma : RightTruncatedGammaSampler

    Notes
    -----
    An ``RNG`` is a single stream. Concurrent workers should each own one,
    e.g. built from :meth:`NumPyRandomEngine.spawn`.
    """

    def __init__(
        self,
        engine: RandomEngine | None = None,
        config: SamplerConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.engine: RandomEngine = engine if engine is not None else NumPyRandomEngine(seed)
        self.config = config or DEFAULT_CONFIG
        self.truncated_normal = TruncatedNormalSampler(self.engine, self.config)
        self.truncated_gamma = RightTruncatedGammaSampler(self.engine, self.config)

    def tnorm(self, left: float, right: float = inf, mu: float = 0.0, sd: float = 1.0) -> float:
        """
        Draw from ``N(mu, sd**2)`` truncated to ``[left, right]``.

        See :meth:`TruncatedNormalSampler.sample`.
        """
        return self.truncated_normal.sample(left, right, mu, sd)

    def tnorm_tail(self, t: float) -> float:
        """Draw from the standard normal truncated to ``[1/sqrt(t), inf)``."""
        return self.truncated_normal.right_tail(t)

    def rtgamma_rate(self, shape: float, rate: float, right: float) -> float:
        """
        Draw from ``Gamma(shape, rate)`` truncated to ``(0, right]``.

        See :meth:`RightTruncatedGammaSampler.sample`.
        """
        return self.truncated_gamma.sample(shape, rate, right)

    @staticmethod
    def gamma_function(x: float, log: bool = False) -> float:
        return gamma_function(x, log=log)

    @staticmethod
    def beta_function(a: float, b: float, log: bool = False) -> float:
        return beta_function(a, b, log=log)


__all__ = ["RNG"]
