# mcpathgen/simulation/random_sequences.py
"""
Random sequence sources feeding the path generators.

A source produces flat draws of a fixed dimension wrapped in a ``Sample``:
    - next_sequence(): advance and return a fresh draw
    - last_sequence(): return the latest draw again, without advancing

``last_sequence`` exists for antithetic pairing; before the first
``next_sequence`` call it returns a zero draw. Sources are stateful and not
safe to share between threads.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
from scipy.stats import norm
from scipy.stats.qmc import Sobol

from mcpathgen.common.config import SOBOL_BATCH_SIZE, SOBOL_MAX_DIMENSION
from mcpathgen.exceptions.montecarlo_exceptions import (
    ConfigurationError,
    InputValidationError,
)
from mcpathgen.simulation.sample import Sample

__all__ = [
    "RandomSequenceGenerator",
    "GaussianRandomSequenceGenerator",
    "SobolRandomSequenceGenerator",
]


class RandomSequenceGenerator(ABC):
    """Source of Gaussian draws of fixed dimension."""

    def __init__(self, dimension: int):
        if dimension <= 0:
            raise InputValidationError(f"dimension must be positive, got {dimension}")
        self._dimension = int(dimension)
        self._sequence = Sample(np.zeros(self._dimension), 1.0)

    def dimension(self) -> int:
        return self._dimension

    @abstractmethod
    def _draw(self) -> np.ndarray:
        """Return the next raw draw of length ``dimension``."""

    def next_sequence(self) -> Sample:
        self._sequence = Sample(self._draw(), 1.0)
        return self._sequence

    def last_sequence(self) -> Sample:
        return self._sequence


class GaussianRandomSequenceGenerator(RandomSequenceGenerator):
    """Pseudo-random i.i.d. standard normals from NumPy's default generator."""

    def __init__(self, dimension: int, seed: Optional[int] = None):
        super().__init__(dimension)
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def _draw(self) -> np.ndarray:
        return self.rng.standard_normal(self._dimension)


class SobolRandomSequenceGenerator(RandomSequenceGenerator):
    """
    Scrambled Sobol points mapped to standard normals.

    Sobol balance properties hold for power-of-two sample counts, so points
    are generated in batches of ``batch_size`` (rounded up to a power of two)
    and handed out one at a time.
    """

    def __init__(
        self,
        dimension: int,
        seed: Optional[int] = None,
        scramble: bool = True,
        batch_size: int = SOBOL_BATCH_SIZE,
    ):
        super().__init__(dimension)
        if dimension > SOBOL_MAX_DIMENSION:
            raise ConfigurationError(
                f"Sobol sequences support at most {SOBOL_MAX_DIMENSION} dimensions, "
                f"got {dimension}"
            )
        if batch_size <= 0:
            raise InputValidationError(f"batch_size must be positive, got {batch_size}")

        self.seed = seed
        self.batch_size = 1 << (int(batch_size) - 1).bit_length()
        self.sampler = Sobol(d=self._dimension, scramble=scramble, seed=seed)
        self._batch = np.empty((0, self._dimension))
        self._cursor = 0

    def _draw(self) -> np.ndarray:
        if self._cursor >= self._batch.shape[0]:
            uniforms = self.sampler.random(self.batch_size)
            # Clamp to avoid inf at boundaries
            self._batch = norm.ppf(np.clip(uniforms, 1e-10, 1 - 1e-10))
            self._cursor = 0
        draw = self._batch[self._cursor].copy()
        self._cursor += 1
        return draw
