"""
Right-Truncated Gamma Sampler
=============================

Exact sampling of ``Gamma(shape, rate)`` restricted to ``(0, right]``.

The truncation point is first normalised to 1: if
``X ~ RTGamma(a, b, t)`` then ``X = t Y`` with ``Y ~ RTGamma(a, b t, 1)``.
Two strategies then sample ``Y``:

- **direct rejection**: draw from the untruncated gamma and discard draws
  above 1; used when most of the mass already lies below 1;
- **Beta series**: expand ``exp(-b y) = exp(-b) exp(b (1 - y))`` in a power
  series, which writes the truncated density as a discrete mixture of
  ``Beta(a, k)`` densities, ``k = 1, 2, ...``, with weights

  .. math::

     \\omega_k = \\exp\\left(-b + (a + k - 1)\\ln b - \\ln\\Gamma(a + k)
                 - \\ln P(1; a, b)\\right),

  where ``P`` is the gamma CDF. The weights sum to one, so the mixture index
  is drawn by inversion over the running sum.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_rng.config import DEFAULT_CONFIG, SamplerConfig
from pysatl_rng.errors import IterationLimitExceededError
from pysatl_rng.truncated._loop import attempts
from pysatl_rng.types import GammaParameters

if TYPE_CHECKING:
    from pysatl_rng.engine.api import RandomEngine

logger = logging.getLogger(__name__)


class RightTruncatedGammaSampler:
    """
    Sampler for ``Gamma(shape, rate)`` truncated to ``(0, right]``.

    Parameters
    ----------
    engine : RandomEngine
        Source of uniform, gamma and beta draws, and of the gamma CDF and
        log-gamma evaluations.
    config : SamplerConfig, optional
        Strategy threshold, progress interval, interrupt hook and loop guard.

    Notes
    -----
    - Parameters are validated before the first draw.
    - Both strategies are exact wherever the truncated mass is in ``(0, 1)``;
      ``config.direct_rejection_threshold`` only selects the cheaper one.
    """

    def __init__(self, engine: RandomEngine, config: SamplerConfig | None = None) -> None:
        self.engine = engine
        self.config = config or DEFAULT_CONFIG

    def sample(self, shape: float, rate: float, right: float) -> float:
        """
        Draw one variate from ``Gamma(shape, rate)`` truncated to ``(0, right]``.

        Parameters
        ----------
        shape : float
            Shape ``a > 0``.
        rate : float
            Rate ``b > 0``.
        right : float
            Truncation point ``t > 0``.

        Returns
        -------
        float
            A draw in ``(0, right]``.

        Raises
        ------
        InvalidParameterError
            If any parameter is not positive (or is NaN).
        """
        params = GammaParameters(shape, rate).normalized(right)

        p = self.engine.gamma_cdf(1.0, params.shape, params.rate)
        if p > self.config.direct_rejection_threshold:
            logger.debug("rtgamma(a=%g, b=%g): direct rejection, p=%g", shape, params.rate, p)
            y = self.direct_rejection(params.shape, params.rate)
        else:
            logger.debug("rtgamma(a=%g, b=%g): beta series, p=%g", shape, params.rate, p)
            y = self.beta_series(params.shape, params.rate)

        return right * y

    rtgamma_rate = sample

    def direct_rejection(self, shape: float, rate: float) -> float:
        """
        Draw from ``Gamma(shape, rate)`` truncated to ``(0, 1]`` by rejection.

        Expected number of proposals is ``1 / P(1; shape, rate)``.
        """
        max_iterations = self.config.max_iterations
        for _ in attempts(max_iterations):
            x = self.engine.gamma_rate(shape, rate)
            if x <= 1.0:
                return x
        raise IterationLimitExceededError("rtgamma direct rejection", max_iterations)

    def mixture_weight(self, k: int, shape: float, rate: float) -> float:
        """
        Weight of the ``Beta(shape, k)`` component in the series expansion.

        Parameters
        ----------
        k : int
            Component index, ``k >= 1``.
        shape, rate : float
            Gamma parameters after normalising the truncation point to 1.

        Returns
        -------
        float
            ``omega_k``; the weights over ``k = 1, 2, ...`` sum to one.
        """
        engine = self.engine
        log_coef = (
            -rate
            + (shape + k - 1) * math.log(rate)
            - engine.ln_gamma(shape + k)
            - engine.gamma_cdf(1.0, shape, rate, log=True)
        )
        return math.exp(log_coef)

    def beta_series(self, shape: float, rate: float) -> float:
        """
        Draw from ``Gamma(shape, rate)`` truncated to ``(0, 1]`` via the Beta mixture.

        The mixture index ``k`` is the first one whose cumulative weight
        reaches ``u ~ U(0, 1)``; the draw is then ``Beta(shape, k)``.

        Every ``config.progress_interval`` terms the current state is logged
        at WARNING level and ``config.interrupt_check`` (if set) is called with
        ``k``; the hook may raise to cancel the draw.
        """
        config = self.config
        u = self.engine.uniform()

        k = 1
        cdf = self.mixture_weight(k, shape, rate)
        for _ in attempts(config.max_iterations):
            if u <= cdf:
                return self.engine.beta(shape, k)
            k += 1
            weight = self.mixture_weight(k, shape, rate)
            if weight == 0.0 and k > rate:
                # past the mode the remaining weights underflow and cdf cannot grow
                return self.engine.beta(shape, k)
            cdf += weight
            if k % config.progress_interval == 0:
                logger.warning(
                    "rtgamma beta series (itr k=%d): a=%g, b=%g, u=%g, cdf=%g",
                    k,
                    shape,
                    rate,
                    u,
                    cdf,
                )
                if config.interrupt_check is not None:
                    config.interrupt_check(k)
        raise IterationLimitExceededError("rtgamma beta series", config.max_iterations)


__all__ = ["RightTruncatedGammaSampler"]
