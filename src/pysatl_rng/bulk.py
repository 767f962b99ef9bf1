"""
Bulk Sampling
=============

Helpers that repeat a scalar sampler element-wise. Per-element parameters
may be scalars (broadcast) or sequences, which are cycled by index modulo
their length when shorter than the output.

Examples
--------
    >>> from pysatl_rng import RNG
    >>> from pysatl_rng.bulk import fill
    >>> rng = RNG(seed=1)
    >>> draws = fill(rng.tnorm, 6, [0.0, 1.0, 2.0])  # left cycles 0, 1, 2, 0, 1, 2
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableSequence

    from pysatl_rng.types import NumericArray, ScalarSampler


def _as_sequence(parameter: Any) -> Sequence[Any] | np.ndarray[Any, Any]:
    if isinstance(parameter, np.ndarray):
        arr = parameter.ravel()
    elif isinstance(parameter, Sequence) and not isinstance(parameter, str):
        arr = parameter
    else:
        return (parameter,)
    if len(arr) == 0:
        raise ValueError("Parameter sequences must not be empty")
    return arr


def iter_draws(draw: ScalarSampler, n: int, *parameters: Any) -> Iterator[float]:
    """
    Lazily yield ``n`` draws, cycling per-element parameters.

    Parameters
    ----------
    draw : callable
        Scalar sampler, called as ``draw(p1[i % len(p1)], p2[i % len(p2)], ...)``.
    n : int
        Number of draws, non-negative.
    *parameters
        Scalars or non-empty sequences / arrays.

    Raises
    ------
    ValueError
        If ``n < 0`` or a parameter sequence is empty.
    """
    if n < 0:
        raise ValueError(f"Number of samples must be non-negative, got {n}")
    columns = [_as_sequence(p) for p in parameters]
    for i in range(n):
        yield float(draw(*(col[i % len(col)] for col in columns)))


def fill(draw: ScalarSampler, size: int | tuple[int, ...], *parameters: Any) -> NumericArray:
    """
    Draw an array of variates from a scalar sampler.

    Parameters
    ----------
    draw : callable
        Scalar sampler such as :meth:`pysatl_rng.RNG.tnorm`.
    size : int or tuple of int
        Output shape. Elements are filled in C order, so parameter cycling
        follows the flattened index.
    *parameters
        Scalars or non-empty sequences / arrays.

    Returns
    -------
    numpy.ndarray
        Float64 array of shape ``size``.
    """
    shape = (size,) if isinstance(size, int) else tuple(size)
    if any(d < 0 for d in shape):
        raise ValueError(f"Sample shape must be non-negative, got {shape}")
    n = int(np.prod(shape, dtype=np.int64))
    values = np.fromiter(iter_draws(draw, n, *parameters), dtype=np.float64, count=n)
    return values.reshape(shape)


def fill_into(out: MutableSequence[float], draw: ScalarSampler, *parameters: Any) -> None:
    """Overwrite every element of ``out`` with a draw, cycling parameters by index."""
    for i, value in enumerate(iter_draws(draw, len(out), *parameters)):
        out[i] = value


__all__ = ["iter_draws", "fill", "fill_into"]
