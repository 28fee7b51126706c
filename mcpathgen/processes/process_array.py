# mcpathgen/processes/process_array.py
"""
Correlated array of single-factor processes.

The correlation matrix is factorized once, at construction, into a mixing
matrix L with L @ L.T ≈ correlation. Every independent draw vector dw is
turned into correlated noise dz = L @ dw before being handed to the
individual processes.
"""

import logging
from typing import Sequence

import numpy as np

from mcpathgen.exceptions.montecarlo_exceptions import ConfigurationError
from mcpathgen.processes.base import StochasticProcess, StochasticProcess1D
from mcpathgen.utils.linalg import check_correlation_matrix, pseudo_sqrt

logger = logging.getLogger(__name__)


class StochasticProcessArray(StochasticProcess):
    def __init__(
        self,
        processes: Sequence[StochasticProcess1D],
        correlation,
        salvaging: str = "none",
    ):
        processes = list(processes)
        if not processes:
            raise ConfigurationError("no processes given")
        correlation = check_correlation_matrix(correlation, size=len(processes))

        self.processes = processes
        self.correlation = correlation.copy()
        self.correlation.setflags(write=False)
        self.sqrt_correlation = pseudo_sqrt(self.correlation, salvaging=salvaging)
        self.sqrt_correlation.setflags(write=False)
        logger.debug(
            "StochasticProcessArray: %d processes, salvaging=%s",
            len(processes),
            salvaging,
        )

    def size(self) -> int:
        return len(self.processes)

    def initial_values(self) -> np.ndarray:
        return np.array([p.x0() for p in self.processes], dtype=float)

    def drift(self, t: float, x: np.ndarray) -> np.ndarray:
        return np.array(
            [p.drift(t, x[i]) for i, p in enumerate(self.processes)], dtype=float
        )

    def diffusion(self, t: float, x: np.ndarray) -> np.ndarray:
        sigma = np.array(
            [p.diffusion(t, x[i]) for i, p in enumerate(self.processes)], dtype=float
        )
        return self.sqrt_correlation * sigma[:, None]

    def expectation(self, t: float, x0: np.ndarray, dt: float) -> np.ndarray:
        return np.array(
            [p.expectation(t, x0[i], dt) for i, p in enumerate(self.processes)],
            dtype=float,
        )

    def std_deviation(self, t: float, x0: np.ndarray, dt: float) -> np.ndarray:
        std = np.array(
            [p.std_deviation(t, x0[i], dt) for i, p in enumerate(self.processes)],
            dtype=float,
        )
        return self.sqrt_correlation * std[:, None]

    def covariance(self, t: float, x0: np.ndarray, dt: float) -> np.ndarray:
        std = np.array(
            [p.std_deviation(t, x0[i], dt) for i, p in enumerate(self.processes)],
            dtype=float,
        )
        return self.correlation * np.outer(std, std)

    def apply(self, x0: np.ndarray, dx: np.ndarray) -> np.ndarray:
        return np.array(
            [p.apply(x0[i], dx[i]) for i, p in enumerate(self.processes)], dtype=float
        )

    def evolve(self, t: float, x0: np.ndarray, dt: float, dw: np.ndarray) -> np.ndarray:
        dz = self.sqrt_correlation @ dw
        return np.array(
            [p.evolve(t, x0[i], dt, dz[i]) for i, p in enumerate(self.processes)],
            dtype=float,
        )
