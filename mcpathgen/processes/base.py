# mcpathgen/processes/base.py
"""
Stochastic process interfaces.

    dx = mu(t, x) dt + sigma(t, x) dW

Two ways of stepping a process are supported, matching the two generation
schemes:
    - decomposed: drift(t, x), std_deviation(t, x, dt) and apply(x, dx),
      with the caller combining drift and diffusion into one increment
    - fused: evolve(t, x, dt, dw), where the process owns the whole
      transition and may use an exact scheme instead of Euler

The defaults below give the Euler discretization; subclasses override
``expectation``/``std_deviation``/``evolve`` when they know better.
A process that only overrides ``evolve`` can skip ``drift``/``diffusion``;
it then works with the fused scheme only.
"""

from abc import ABC, abstractmethod

import numpy as np


class StochasticProcess(ABC):
    """Multi-factor process with ``size()`` correlated components."""

    @abstractmethod
    def size(self) -> int:
        """Number of factors."""

    @abstractmethod
    def initial_values(self) -> np.ndarray:
        """State at t = 0."""

    def drift(self, t: float, x: np.ndarray) -> np.ndarray:
        """Drift vector mu(t, x)."""
        raise NotImplementedError(f"{type(self).__name__} does not expose a drift")

    def diffusion(self, t: float, x: np.ndarray) -> np.ndarray:
        """Diffusion matrix sigma(t, x), size() x size()."""
        raise NotImplementedError(f"{type(self).__name__} does not expose a diffusion")

    def expectation(self, t: float, x0: np.ndarray, dt: float) -> np.ndarray:
        return self.apply(x0, self.drift(t, x0) * dt)

    def std_deviation(self, t: float, x0: np.ndarray, dt: float) -> np.ndarray:
        return self.diffusion(t, x0) * np.sqrt(dt)

    def covariance(self, t: float, x0: np.ndarray, dt: float) -> np.ndarray:
        sigma = self.diffusion(t, x0)
        return sigma @ sigma.T * dt

    def apply(self, x0: np.ndarray, dx: np.ndarray) -> np.ndarray:
        return x0 + dx

    def evolve(self, t: float, x0: np.ndarray, dt: float, dw: np.ndarray) -> np.ndarray:
        return self.apply(
            self.expectation(t, x0, dt), self.std_deviation(t, x0, dt) @ dw
        )


class StochasticProcess1D(ABC):
    """Single-factor process working on plain floats."""

    @abstractmethod
    def x0(self) -> float:
        """Initial value."""

    @abstractmethod
    def drift(self, t: float, x: float) -> float:
        pass

    @abstractmethod
    def diffusion(self, t: float, x: float) -> float:
        pass

    def expectation(self, t: float, x0: float, dt: float) -> float:
        return self.apply(x0, self.drift(t, x0) * dt)

    def std_deviation(self, t: float, x0: float, dt: float) -> float:
        return self.diffusion(t, x0) * np.sqrt(dt)

    def variance(self, t: float, x0: float, dt: float) -> float:
        sigma = self.diffusion(t, x0)
        return sigma * sigma * dt

    def apply(self, x0: float, dx: float) -> float:
        return x0 + dx

    def evolve(self, t: float, x0: float, dt: float, dw: float) -> float:
        return self.apply(
            self.expectation(t, x0, dt), self.std_deviation(t, x0, dt) * dw
        )
