# mcpathgen/simulation/multipath_generator.py
"""
Multi-asset path generator.

Turns draws from a random sequence source into ``MultiPath`` samples of a
stochastic process on a time grid. Two generation schemes are available,
chosen once at construction:

    - "drift_diffusion": at each step i = 0..m-2 the process supplies
      drift(t_i, x) and std_deviation(t_i, x, dt_i); both contributions are
      recorded in the path diagnostics and combined through
      process.apply(x, drift + diffusion), giving the value at i + 1.
    - "evolve": the value at index 0 is the initial state; for
      i = 1..m-1 the process performs the whole transition
      process.evolve(t_{i-1}, x, dt_{i-1}, dw). No drift/diffusion
      diagnostics are recorded.

Usage:
    >>> grid = TimeGrid.from_horizon(1.0, 12)
    >>> rsg = GaussianRandomSequenceGenerator(process.size() * 12, seed=42)
    >>> generator = MultiPathGenerator(process, grid, rsg, scheme="evolve")
    >>> sample = generator.next()
    >>> mirror = generator.antithetic()

The generator owns one output buffer, allocated at construction and
overwritten in place by every call. ``next()`` and ``antithetic()`` return
that same object: a result is only valid until the next call, so callers
that keep results must ``copy()`` them. An instance is not safe to use from
several threads.
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence, Union

import numpy as np

from mcpathgen.common.config import DEFAULT_GENERATION_SCHEME
from mcpathgen.exceptions.montecarlo_exceptions import (
    ConfigurationError,
    UnsupportedFeatureError,
)
from mcpathgen.processes.base import StochasticProcess, StochasticProcess1D
from mcpathgen.processes.process_array import StochasticProcessArray
from mcpathgen.simulation.path import MultiPath
from mcpathgen.simulation.random_sequences import RandomSequenceGenerator
from mcpathgen.simulation.sample import Sample
from mcpathgen.simulation.time_grid import TimeGrid

__all__ = [
    "GenerationScheme",
    "DriftDiffusionScheme",
    "EvolveScheme",
    "MultiPathGenerator",
    "GENERATION_SCHEMES",
]

logger = logging.getLogger(__name__)


class GenerationScheme(ABC):
    """Fills a MultiPath from one flat draw of size n_assets * (m - 1)."""

    name: str = ""

    @abstractmethod
    def generate(
        self,
        process: StochasticProcess,
        path: MultiPath,
        draw: np.ndarray,
        antithetic: bool,
    ) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _diffusion_term(std_deviation, dw: np.ndarray) -> np.ndarray:
    # Vector of per-factor scalings, or a full mixing matrix
    std_deviation = np.asarray(std_deviation, dtype=float)
    if std_deviation.ndim == 2:
        return std_deviation @ dw
    return std_deviation * dw


class DriftDiffusionScheme(GenerationScheme):
    """Decomposed stepping with drift/diffusion diagnostics."""

    name = "drift_diffusion"

    def generate(self, process, path, draw, antithetic):
        n = process.size()
        grid = path.time_grid
        values, drifts, diffusions = path.values, path.drift, path.diffusion

        state = np.asarray(process.initial_values(), dtype=float)
        values[:, 0] = state
        for i in range(len(grid) - 1):
            t = grid[i]
            dt = grid.dt(i)
            dw = draw[i * n:(i + 1) * n]
            if antithetic:
                dw = -dw

            drift = np.asarray(process.drift(t, state), dtype=float) * dt
            diffusion = _diffusion_term(process.std_deviation(t, state, dt), dw)
            drifts[:, i] = drift
            diffusions[:, i] = diffusion

            state = np.asarray(process.apply(state, drift + diffusion), dtype=float)
            values[:, i + 1] = state


class EvolveScheme(GenerationScheme):
    """Fused stepping through ``process.evolve``."""

    name = "evolve"

    def generate(self, process, path, draw, antithetic):
        n = process.size()
        grid = path.time_grid
        values = path.values

        state = np.asarray(process.initial_values(), dtype=float)
        values[:, 0] = state
        for i in range(1, len(grid)):
            dw = draw[(i - 1) * n:i * n]
            if antithetic:
                dw = -dw
            state = np.asarray(
                process.evolve(grid[i - 1], state, grid.dt(i - 1), dw), dtype=float
            )
            values[:, i] = state


GENERATION_SCHEMES = {
    DriftDiffusionScheme.name: DriftDiffusionScheme,
    EvolveScheme.name: EvolveScheme,
}


def _resolve_scheme(scheme: Union[str, GenerationScheme]) -> GenerationScheme:
    if isinstance(scheme, GenerationScheme):
        return scheme
    try:
        return GENERATION_SCHEMES[scheme]()
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unsupported generation scheme '{scheme}'. "
            f"Supported schemes: {', '.join(GENERATION_SCHEMES)}"
        ) from None


def _check_dimensions(dimension: int, n_assets: int, time_grid: TimeGrid) -> None:
    steps = len(time_grid) - 1
    if dimension != n_assets * steps:
        raise ConfigurationError(
            f"dimension ({dimension}) is not equal to ({n_assets} * {steps}) "
            "the number of assets times the number of time steps"
        )
    if len(time_grid) <= 1:
        raise ConfigurationError("no times given")


class MultiPathGenerator:
    """
    Generates correlated multi-asset paths from a random sequence source.

    Args:
        process: Multi-factor stochastic process.
        time_grid: Simulation instants; needs at least two.
        generator: Random sequence source with
            ``dimension() == process.size() * (len(time_grid) - 1)``.
        brownian_bridge: Accepted, but generation then raises
            ``UnsupportedFeatureError``.
        scheme: "drift_diffusion", "evolve" or a GenerationScheme instance.

    Raises:
        ConfigurationError: On a dimension mismatch, a grid with fewer than
            two instants, or an unknown scheme.
    """

    def __init__(
        self,
        process: StochasticProcess,
        time_grid: TimeGrid,
        generator: RandomSequenceGenerator,
        brownian_bridge: bool = False,
        scheme: Union[str, GenerationScheme] = DEFAULT_GENERATION_SCHEME,
    ):
        _check_dimensions(generator.dimension(), process.size(), time_grid)

        self.process = process
        self.generator = generator
        self.brownian_bridge = brownian_bridge
        self.scheme = _resolve_scheme(scheme)
        self._next = Sample(MultiPath(process.size(), time_grid), 1.0)

        logger.debug(
            "MultiPathGenerator: %d assets, %d steps, scheme=%s, brownian_bridge=%s",
            process.size(),
            len(time_grid) - 1,
            self.scheme.name,
            brownian_bridge,
        )

    @classmethod
    def from_processes(
        cls,
        processes: Sequence[StochasticProcess1D],
        correlation,
        time_grid: TimeGrid,
        generator: RandomSequenceGenerator,
        brownian_bridge: bool = False,
        scheme: Union[str, GenerationScheme] = DEFAULT_GENERATION_SCHEME,
        salvaging: str = "none",
    ) -> "MultiPathGenerator":
        """Build the generator on a correlated ``StochasticProcessArray``."""
        processes = list(processes)
        _check_dimensions(generator.dimension(), len(processes), time_grid)
        process = StochasticProcessArray(processes, correlation, salvaging=salvaging)
        return cls(process, time_grid, generator, brownian_bridge, scheme)

    @property
    def time_grid(self) -> TimeGrid:
        return self._next.value.time_grid

    def next(self) -> Sample:
        """Generate a path from a fresh draw. The result is overwritten by the next call."""
        return self._generate(antithetic=False)

    def antithetic(self) -> Sample:
        """
        Generate the mirror of the last path, reusing its draw with every
        component negated. Only meaningful right after ``next()``.
        """
        return self._generate(antithetic=True)

    def _generate(self, antithetic: bool) -> Sample:
        if self.brownian_bridge:
            raise UnsupportedFeatureError("Brownian bridge")

        sequence = (
            self.generator.last_sequence()
            if antithetic
            else self.generator.next_sequence()
        )
        draw = np.asarray(sequence.value, dtype=float)
        self._next.weight = sequence.weight
        self.scheme.generate(self.process, self._next.value, draw, antithetic)
        return self._next
