# mcpathgen/processes/ornstein_uhlenbeck.py
"""
Ornstein-Uhlenbeck process.

    dx = a (theta - x) dt + sigma dW

Mean and standard deviation of the transition are known in closed form, so
``evolve`` is exact for any step size while the decomposed drift/diffusion
path stays an Euler scheme.
"""

import numpy as np

from mcpathgen.exceptions.montecarlo_exceptions import InputValidationError
from mcpathgen.processes.base import StochasticProcess1D


class OrnsteinUhlenbeckProcess(StochasticProcess1D):
    """
    Attributes:
        speed: Mean reversion speed a (>= 0).
        volatility: Diffusion coefficient sigma (>= 0).
        initial_value: x(0).
        level: Long-run mean theta.
    """

    def __init__(
        self,
        speed: float,
        volatility: float,
        initial_value: float = 0.0,
        level: float = 0.0,
    ):
        if speed < 0:
            raise InputValidationError(f"speed must be non-negative, got {speed}")
        if volatility < 0:
            raise InputValidationError(
                f"volatility must be non-negative, got {volatility}"
            )
        self.speed = float(speed)
        self.volatility = float(volatility)
        self.initial_value = float(initial_value)
        self.level = float(level)

    def x0(self) -> float:
        return self.initial_value

    def drift(self, t: float, x: float) -> float:
        return self.speed * (self.level - x)

    def diffusion(self, t: float, x: float) -> float:
        return self.volatility

    def expectation(self, t: float, x0: float, dt: float) -> float:
        return self.level + (x0 - self.level) * np.exp(-self.speed * dt)

    def std_deviation(self, t: float, x0: float, dt: float) -> float:
        return np.sqrt(self.variance(t, x0, dt))

    def variance(self, t: float, x0: float, dt: float) -> float:
        if self.speed < np.sqrt(np.finfo(float).eps):
            # Brownian limit
            return self.volatility * self.volatility * dt
        return (
            0.5
            * self.volatility
            * self.volatility
            / self.speed
            * (1.0 - np.exp(-2.0 * self.speed * dt))
        )
