from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any

import pytest

from pysatl_rng.engine import NumPyRandomEngine

pytest.importorskip("scipy")


class CountingEngine:
    """Wraps a real engine and counts every method call."""

    def __init__(self, inner: NumPyRandomEngine) -> None:
        self._inner = inner
        self.calls: Counter[str] = Counter()

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    def __getattr__(self, name: str) -> Callable[..., Any]:
        target = getattr(self._inner, name)

        def counted(*args: Any, **kwargs: Any) -> Any:
            self.calls[name] += 1
            return target(*args, **kwargs)

        return counted


class ScriptedEngine:
    """
    Engine replaying pre-defined draws per method.

    Distribution functions are delegated to a real engine so that
    deterministic branch tests still see correct CDF values.
    """

    def __init__(self, **draws: Iterable[float]) -> None:
        self._draws = {name: iter(values) for name, values in draws.items()}
        self._functions = NumPyRandomEngine(0)
        self.calls: Counter[str] = Counter()

    def _next(self, name: str) -> float:
        self.calls[name] += 1
        try:
            return next(self._draws[name])
        except KeyError:
            raise AssertionError(f"unexpected draw: {name}") from None
        except StopIteration:
            raise AssertionError(f"draws for {name} exhausted") from None

    def uniform(self) -> float:
        return self._next("uniform")

    def flat(self, a: float = 0.0, b: float = 1.0) -> float:
        return a + (b - a) * self._next("flat")

    def exponential(self, rate: float) -> float:
        return self._next("exponential")

    def normal(self, mean: float = 0.0, sd: float = 1.0) -> float:
        return mean + sd * self._next("normal")

    def gamma_rate(self, shape: float, rate: float) -> float:
        return self._next("gamma_rate")

    def beta(self, a: float = 1.0, b: float = 1.0) -> float:
        self.calls["beta"] += 1
        self.last_beta = (a, b)
        return 0.5

    def gamma_cdf(self, x: float, shape: float, rate: float, log: bool = False) -> float:
        return self._functions.gamma_cdf(x, shape, rate, log=log)

    def ln_gamma(self, x: float) -> float:
        return self._functions.ln_gamma(x)


@pytest.fixture
def engine() -> NumPyRandomEngine:
    """Seeded default engine."""
    return NumPyRandomEngine(20250101)


@pytest.fixture
def counting_engine() -> CountingEngine:
    """Seeded engine that records how many draws were requested."""
    return CountingEngine(NumPyRandomEngine(7))


@pytest.fixture
def scripted_engine() -> type[ScriptedEngine]:
    """Factory for engines replaying fixed draws."""
    return ScriptedEngine
