# mcpathgen/simulation/__init__.py
"""
Monte Carlo path generation.

    TimeGrid -> RandomSequenceGenerator -> MultiPathGenerator -> Sample[MultiPath]
"""

from mcpathgen.simulation.time_grid import TimeGrid
from mcpathgen.simulation.sample import Sample
from mcpathgen.simulation.path import MultiPath, Path
from mcpathgen.simulation.random_sequences import (
    GaussianRandomSequenceGenerator,
    RandomSequenceGenerator,
    SobolRandomSequenceGenerator,
)
from mcpathgen.simulation.multipath_generator import (
    GENERATION_SCHEMES,
    DriftDiffusionScheme,
    EvolveScheme,
    GenerationScheme,
    MultiPathGenerator,
)

__all__ = [
    "TimeGrid",
    "Sample",
    "Path",
    "MultiPath",
    "RandomSequenceGenerator",
    "GaussianRandomSequenceGenerator",
    "SobolRandomSequenceGenerator",
    "GenerationScheme",
    "DriftDiffusionScheme",
    "EvolveScheme",
    "MultiPathGenerator",
    "GENERATION_SCHEMES",
]
