from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import itertools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def attempts(max_iterations: int | None) -> Iterable[int]:
    """
    Proposal indices ``1, 2, ...`` for an accept/reject loop.

    Parameters
    ----------
    max_iterations : int or None
        If ``None`` the indices never end. Otherwise exactly
        ``max_iterations`` indices are produced.

    Notes
    -----
    Callers ``return`` from inside the ``for`` loop on acceptance and raise
    :class:`~pysatl_rng.errors.IterationLimitExceededError` after it, which
    is only reached when the iteration limit ran out.
    """
    if max_iterations is None:
        return itertools.count(1)
    return range(1, max_iterations + 1)


__all__ = ["attempts"]
