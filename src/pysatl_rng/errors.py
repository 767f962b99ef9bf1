"""
Errors and Warnings
===================

Exception and warning taxonomy shared by the samplers.

- :class:`InvalidParameterError`: malformed parameters, raised before any
  randomness is consumed.
- :class:`IterationLimitExceededError`: an accept/reject loop ran out of
  its optional iteration limit; the call may be retried.
- :class:`NumericalDriftWarning`: a rescaled draw landed (barely) outside
  the requested interval because of floating-point rounding.
"""

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class PySATLRNGError(Exception):
    """Base class for all errors raised by pysatl-rng."""


class InvalidParameterError(PySATLRNGError, ValueError):
    """Sampling parameters are out of domain (NaN, empty interval, non-positive scale...)."""


class IterationLimitExceededError(PySATLRNGError, RuntimeError):
    """
    An accept/reject loop exhausted ``max_iterations`` proposals.

    Parameters
    ----------
    sampler : str
        Name of the loop that gave up.
    iterations : int or None
        Number of proposals made.
    """

    def __init__(self, sampler: str, iterations: int | None) -> None:
        super().__init__(
            f"{sampler}: no proposal accepted after {iterations} iterations; retry the call "
            "or raise SamplerConfig.max_iterations"
        )
        self.sampler = sampler
        self.iterations = iterations


class NumericalDriftWarning(RuntimeWarning):
    """A location-scale draw fell outside its interval due to rounding."""


__all__ = [
    "PySATLRNGError",
    "InvalidParameterError",
    "IterationLimitExceededError",
    "NumericalDriftWarning",
]
