# mcpathgen/processes/geometric_brownian_motion.py
"""
Geometric Brownian motion.

    dS = mu S dt + sigma S dW

The state is the price S, but drift and diffusion are expressed on log S,
so that ``apply(S, dx) = S exp(dx)``:

    drift     = mu - 0.5 sigma^2
    diffusion = sigma

With these conventions the Euler step in log space is the exact transition
    S_{t+dt} = S_t exp((mu - 0.5 sigma^2) dt + sigma sqrt(dt) Z)
"""

import numpy as np

from mcpathgen.exceptions.montecarlo_exceptions import InputValidationError
from mcpathgen.processes.base import StochasticProcess1D


class GeometricBrownianMotionProcess(StochasticProcess1D):
    def __init__(self, initial_value: float, mu: float, sigma: float):
        if initial_value <= 0:
            raise InputValidationError(
                f"initial value must be positive, got {initial_value}"
            )
        if sigma < 0:
            raise InputValidationError(f"sigma must be non-negative, got {sigma}")
        self.initial_value = float(initial_value)
        self.mu = float(mu)
        self.sigma = float(sigma)

    def x0(self) -> float:
        return self.initial_value

    def drift(self, t: float, x: float) -> float:
        return self.mu - 0.5 * self.sigma * self.sigma

    def diffusion(self, t: float, x: float) -> float:
        return self.sigma

    def apply(self, x0: float, dx: float) -> float:
        return x0 * np.exp(dx)

    def __repr__(self) -> str:
        return (
            f"GeometricBrownianMotionProcess(x0={self.initial_value}, "
            f"mu={self.mu}, sigma={self.sigma})"
        )
