# Expose main modules for easier imports
from mcpathgen import common, exceptions, pricing_models, processes, simulation, utils
from mcpathgen.simulation import MultiPathGenerator, TimeGrid

__version__ = "0.1.0"
__all__ = [
    "common",
    "exceptions",
    "pricing_models",
    "processes",
    "simulation",
    "utils",
    "MultiPathGenerator",
    "TimeGrid",
]
