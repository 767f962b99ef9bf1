"""
Special Functions
=================

Gamma and Beta function values used by the right-truncated gamma sampler.
Beta values are evaluated in log space through :func:`scipy.special.gammaln`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import gamma, gammaln


def gamma_function(x: float, log: bool = False) -> float:
    """
    Gamma function ``Γ(x)``.

    Parameters
    ----------
    x : float
        Argument; poles at non-positive integers give ``inf`` or ``nan``.
    log : bool, default False
        If ``True``, return ``ln |Γ(x)|``.

    Returns
    -------
    float
        ``Γ(x)`` (signed) or the logarithm of its absolute value.
    """
    if log:
        return float(gammaln(x))
    return float(gamma(x))


def beta_function(a: float, b: float, log: bool = False) -> float:
    """
    Beta function ``B(a, b) = Γ(a) Γ(b) / Γ(a + b)``.

    Parameters
    ----------
    a, b : float
        Positive arguments.
    log : bool, default False
        If ``True``, return ``ln B(a, b)``.

    Returns
    -------
    float
        ``B(a, b)`` or its natural logarithm.
    """
    out = (
        gamma_function(a, log=True)
        + gamma_function(b, log=True)
        - gamma_function(a + b, log=True)
    )
    return out if log else math.exp(out)


def beta_pdf(x: float, a: float, b: float) -> float:
    """Density of ``Beta(a, b)`` at ``x``; zero outside ``[0, 1]``."""
    if x < 0.0 or x > 1.0:
        return 0.0
    if x == 0.0 or x == 1.0:
        # boundary: finite only where the corresponding exponent vanishes
        exponent = a - 1.0 if x == 0.0 else b - 1.0
        if exponent > 0:
            return 0.0
        if exponent < 0:
            return math.inf
        return math.exp(-beta_function(a, b, log=True))
    log_density = (a - 1.0) * math.log(x) + (b - 1.0) * math.log1p(-x)
    return math.exp(log_density - beta_function(a, b, log=True))


__all__ = ["gamma_function", "beta_function", "beta_pdf"]
