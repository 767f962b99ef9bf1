"""
Truncated Normal Tail Bounds
============================

Closed-form constants of Robert's (1995) accept/reject scheme for the
truncated standard normal.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

SQRT_2PI = math.sqrt(2.0 * math.pi)
"""Width below which a uniform proposal is used for intervals straddling zero."""


def optimal_tilt(left: float) -> float:
    """
    Rate of the optimal shifted-exponential proposal for ``[left, inf)``.

    Parameters
    ----------
    left : float
        Left truncation point, ``left >= 0``.

    Returns
    -------
    float
        ``0.5 * (left + sqrt(left**2 + 4))``, the rate minimising the
        expected number of rejections.
    """
    return 0.5 * left + 0.5 * math.hypot(left, 2.0)


def exponential_regime_lower_bound(left: float) -> float:
    """
    Width threshold between the uniform and truncated-exponential proposals.

    For a two-sided truncation ``[left, right]`` with ``left >= 0`` the
    exponential proposal is cheaper whenever ``right`` exceeds the returned
    value.

    Parameters
    ----------
    left : float
        Left truncation point, ``left >= 0``.

    Returns
    -------
    float
        ``left + exp(0.5 * left * (left - astar) + 0.5)`` with
        ``astar = optimal_tilt(left)``.
    """
    astar = optimal_tilt(left)
    return left + math.exp(0.5 * left * (left - astar) + 0.5)


__all__ = ["SQRT_2PI", "optimal_tilt", "exponential_regime_lower_bound"]
