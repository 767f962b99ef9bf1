"""
Sampler Configuration
=====================

Tuning knobs shared by the truncated samplers. Defaults reproduce the
classical behaviour: unbounded accept/reject loops, direct rejection for the
right-truncated gamma when more than 95% of the mass lies below the
truncation point, and a progress report every 100000 Beta-series terms.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_rng.types import InterruptCheck


@dataclass(frozen=True, slots=True)
class SamplerConfig:
    """
    Configuration for the truncated samplers.

    Parameters
    ----------
    direct_rejection_threshold : float, default 0.95
        If the untruncated gamma puts more than this probability below the
        truncation point, the right-truncated gamma sampler draws from the
        untruncated gamma and rejects; otherwise it uses the Beta series.
        Must lie in ``[0, 1]``.
    progress_interval : int, default 100000
        Number of Beta-series terms between two progress reports.
    max_iterations : int | None, default None
        Upper bound on proposals per accept/reject loop. ``None`` keeps the
        loops unbounded; when set, exhaustion raises
        :class:`~pysatl_rng.errors.IterationLimitExceededError`.
    interrupt_check : callable, optional
        Called with the current term index at every progress report of the
        Beta series. It may raise to cancel the draw.

    Notes
    -----
    - The threshold is a performance heuristic only: both gamma strategies
      are exact for any truncated mass in ``(0, 1)``.
    - Expected proposals per truncated-normal draw are bounded for every
      valid interval, so ``max_iterations`` is only a guard for callers that
      need bounded latency.
    """

    direct_rejection_threshold: float = 0.95
    progress_interval: int = 100_000
    max_iterations: int | None = None
    interrupt_check: InterruptCheck | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0.0 <= self.direct_rejection_threshold <= 1.0:
            raise ValueError(
                "direct_rejection_threshold must be in [0, 1], "
                f"got {self.direct_rejection_threshold}"
            )
        if self.progress_interval < 1:
            raise ValueError(f"progress_interval must be positive, got {self.progress_interval}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")


DEFAULT_CONFIG = SamplerConfig()
"""Configuration used when a sampler is created without one."""


__all__ = ["SamplerConfig", "DEFAULT_CONFIG"]
