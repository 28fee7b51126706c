# mcpathgen/pricing_models/monte_carlo.py
"""
Monte Carlo model driven by a MultiPathGenerator.

Each sample is priced by a path pricer. With antithetic variates enabled,
every ``next()`` path is paired with its ``antithetic()`` mirror and the two
prices are averaged into one sample. Samples are weighted by the weight of
the draw they were generated from.

Usage:
    >>> pricer = BasketPathPricer("call", strike=100.0, discount=np.exp(-0.05))
    >>> model = MonteCarloModel(generator, pricer, antithetic_variate=True)
    >>> model.add_samples(10000)
    >>> model.mean(), model.error_estimate()
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np

from mcpathgen.exceptions.montecarlo_exceptions import (
    InputValidationError,
    MonteCarloError,
)
from mcpathgen.simulation.multipath_generator import MultiPathGenerator
from mcpathgen.simulation.path import MultiPath
from mcpathgen.utils.decorators.timing import timeit
from mcpathgen.utils.utils import as_option_type, exercise_payoff

__all__ = ["PathPricer", "BasketPathPricer", "MonteCarloModel"]


class PathPricer(ABC):
    @abstractmethod
    def __call__(self, path: MultiPath) -> float:
        pass


class BasketPathPricer(PathPricer):
    """European payoff on the weighted sum of terminal asset values."""

    def __init__(
        self,
        option_type,
        strike: float,
        discount: float,
        weights: Optional[Sequence[float]] = None,
    ):
        if strike <= 0:
            raise InputValidationError(f"strike must be positive, got {strike}")
        self.option_type = as_option_type(option_type)
        self.strike = strike
        self.discount = discount
        self.weights = None if weights is None else np.asarray(weights, dtype=float)

    def __call__(self, path: MultiPath) -> float:
        terminal = path.values[:, -1]
        if self.weights is None:
            basket = terminal.mean()
        elif self.weights.shape != terminal.shape:
            raise InputValidationError(
                f"expected {terminal.size} basket weights, got {self.weights.size}"
            )
        else:
            basket = self.weights @ terminal
        return self.discount * exercise_payoff(self.option_type, basket, self.strike)


class MonteCarloModel:
    def __init__(
        self,
        path_generator: MultiPathGenerator,
        path_pricer: PathPricer,
        antithetic_variate: bool = False,
    ):
        self.path_generator = path_generator
        self.path_pricer = path_pricer
        self.antithetic_variate = antithetic_variate
        self._values: List[float] = []
        self._weights: List[float] = []

    @timeit
    def add_samples(self, samples: int) -> None:
        if samples <= 0:
            raise InputValidationError(f"samples must be positive, got {samples}")

        for _ in range(samples):
            path = self.path_generator.next()
            weight = path.weight
            price = self.path_pricer(path.value)
            if self.antithetic_variate:
                # price the first path before the buffer is overwritten
                mirror = self.path_generator.antithetic()
                price = 0.5 * (price + self.path_pricer(mirror.value))
            self._values.append(price)
            self._weights.append(weight)

    def sample_count(self) -> int:
        return len(self._values)

    def mean(self) -> float:
        if not self._values:
            raise MonteCarloError("no samples added")
        return float(np.average(self._values, weights=self._weights))

    def error_estimate(self) -> float:
        """Standard error of the weighted mean."""
        n = len(self._values)
        if n < 2:
            raise MonteCarloError("at least two samples are needed for an error estimate")
        values = np.asarray(self._values)
        mean = np.average(values, weights=self._weights)
        variance = np.average((values - mean) ** 2, weights=self._weights) * n / (n - 1)
        return float(np.sqrt(variance / n))
