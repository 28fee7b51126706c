# mcpathgen/processes/__init__.py
"""
Stochastic processes driving the path generators.

Every process exposes both the decomposed interface
    drift(t, x), std_deviation(t, x, dt), apply(x, dx)
and the fused one
    evolve(t, x, dt, dw)
"""

from mcpathgen.processes.base import StochasticProcess, StochasticProcess1D
from mcpathgen.processes.geometric_brownian_motion import GeometricBrownianMotionProcess
from mcpathgen.processes.ornstein_uhlenbeck import OrnsteinUhlenbeckProcess
from mcpathgen.processes.process_array import StochasticProcessArray

__all__ = [
    "StochasticProcess",
    "StochasticProcess1D",
    "GeometricBrownianMotionProcess",
    "OrnsteinUhlenbeckProcess",
    "StochasticProcessArray",
]
