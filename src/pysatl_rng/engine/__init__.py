"""
Random engines subpackage

- engine protocol consumed by the samplers (:mod:`.api`);
- default NumPy/SciPy-backed implementation (:mod:`.numpy_engine`).
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .api import RandomEngine
from .numpy_engine import NumPyRandomEngine

__all__ = [
    "RandomEngine",
    "NumPyRandomEngine",
]
