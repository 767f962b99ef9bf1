"""
Truncated samplers subpackage

- tail-bound constants of the truncated normal scheme (:mod:`.tail_bounds`);
- truncated normal sampler (:mod:`.normal`);
- right-truncated gamma sampler (:mod:`.gamma`).
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .gamma import RightTruncatedGammaSampler
from .normal import TruncatedNormalSampler
from .tail_bounds import SQRT_2PI, exponential_regime_lower_bound, optimal_tilt

__all__ = [
    "TruncatedNormalSampler",
    "RightTruncatedGammaSampler",
    "SQRT_2PI",
    "optimal_tilt",
    "exponential_regime_lower_bound",
]
