"""
PySATL RNG
==========

Unit tests: engine, special functions, truncated samplers, bulk helpers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
