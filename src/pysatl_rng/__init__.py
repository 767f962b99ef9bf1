"""
PySATL RNG
==========

Random variate generation for Markov-Chain-Monte-Carlo samplers: a random
engine facade over NumPy/SciPy, exact samplers for the truncated normal and
the right-truncated gamma distributions, and bulk sampling helpers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .bulk import fill, fill_into, iter_draws
from .config import DEFAULT_CONFIG, SamplerConfig
from .engine import *
from .engine import __all__ as _engine_all
from .errors import *
from .errors import __all__ as _errors_all
from .rng import RNG
from .special import beta_function, beta_pdf, gamma_function
from .truncated import *
from .truncated import __all__ as _truncated_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-rng")
__all__ = [
    "__version__",
    "RNG",
    "SamplerConfig",
    "DEFAULT_CONFIG",
    "fill",
    "fill_into",
    "iter_draws",
    "gamma_function",
    "beta_function",
    "beta_pdf",
    *_engine_all,
    *_errors_all,
    *_truncated_all,
    *_types_all,
]

del _engine_all
del _errors_all
del _truncated_all
del _types_all
