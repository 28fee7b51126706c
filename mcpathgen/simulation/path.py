# mcpathgen/simulation/path.py
"""
Containers for generated trajectories.

A ``Path`` holds one factor's value at every instant of a ``TimeGrid`` plus
two diagnostic arrays, ``drift`` and ``diffusion``, with one entry per time
step. A ``MultiPath`` holds one ``Path`` per factor; its paths are views on
three (n_assets, m) / (n_assets, m - 1) arrays so the whole sample can be
overwritten in place.
"""

from typing import Iterator, List, Optional

import numpy as np
import pandas as pd

from mcpathgen.exceptions.montecarlo_exceptions import InputValidationError
from mcpathgen.simulation.time_grid import TimeGrid


class Path:
    """Single-factor trajectory on a time grid."""

    def __init__(
        self,
        time_grid: TimeGrid,
        values: Optional[np.ndarray] = None,
        drift: Optional[np.ndarray] = None,
        diffusion: Optional[np.ndarray] = None,
    ):
        m = len(time_grid)
        steps = max(m - 1, 0)
        values = np.zeros(m) if values is None else np.asarray(values, dtype=float)
        drift = np.zeros(steps) if drift is None else np.asarray(drift, dtype=float)
        diffusion = (
            np.zeros(steps) if diffusion is None else np.asarray(diffusion, dtype=float)
        )

        if values.shape != (m,):
            raise InputValidationError(
                f"path values must have length {m}, got shape {values.shape}"
            )
        if drift.shape != (steps,) or diffusion.shape != drift.shape:
            raise InputValidationError(f"drift and diffusion must have length {steps}")

        self._time_grid = time_grid
        self._values = values
        self._drift = drift
        self._diffusion = diffusion

    @property
    def time_grid(self) -> TimeGrid:
        return self._time_grid

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def drift(self) -> np.ndarray:
        """Drift contribution of each time step."""
        return self._drift

    @property
    def diffusion(self) -> np.ndarray:
        """Diffusion contribution of each time step."""
        return self._diffusion

    def time(self, i: int) -> float:
        return float(self._time_grid[i])

    def front(self) -> float:
        return float(self._values[0])

    def back(self) -> float:
        return float(self._values[-1])

    def __len__(self) -> int:
        return self._values.size

    def __getitem__(self, i):
        return self._values[i]

    def __setitem__(self, i, value) -> None:
        self._values[i] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def copy(self) -> "Path":
        return Path(
            self._time_grid,
            self._values.copy(),
            self._drift.copy(),
            self._diffusion.copy(),
        )

    def __repr__(self) -> str:
        return f"Path(size={len(self)}, front={self.front()}, back={self.back()})"


class MultiPath:
    """
    Correlated trajectories of ``n_assets`` factors sharing one time grid.

    Every path has the grid's length. ``values[j, i]`` is the value of asset
    ``j`` at instant ``i``; ``paths[j]`` exposes the same storage as a
    ``Path``.
    """

    def __init__(self, n_assets: int, time_grid: TimeGrid):
        if n_assets <= 0:
            raise InputValidationError(f"number of assets must be positive, got {n_assets}")
        m = len(time_grid)
        steps = max(m - 1, 0)
        self._time_grid = time_grid
        self._values = np.zeros((n_assets, m))
        self._drift = np.zeros((n_assets, steps))
        self._diffusion = np.zeros((n_assets, steps))
        self._paths: List[Path] = [
            Path(time_grid, self._values[j], self._drift[j], self._diffusion[j])
            for j in range(n_assets)
        ]

    @property
    def time_grid(self) -> TimeGrid:
        return self._time_grid

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def drift(self) -> np.ndarray:
        return self._drift

    @property
    def diffusion(self) -> np.ndarray:
        return self._diffusion

    def asset_number(self) -> int:
        return len(self._paths)

    def path_size(self) -> int:
        return len(self._time_grid)

    def __len__(self) -> int:
        return len(self._paths)

    def __getitem__(self, j: int) -> Path:
        return self._paths[j]

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def copy(self) -> "MultiPath":
        other = MultiPath(self.asset_number(), self._time_grid)
        other._values[...] = self._values
        other._drift[...] = self._drift
        other._diffusion[...] = self._diffusion
        return other

    def to_frame(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """Values as a DataFrame indexed by time, one column per asset."""
        if columns is None:
            columns = [f"asset_{j}" for j in range(self.asset_number())]
        if len(columns) != self.asset_number():
            raise InputValidationError(
                f"expected {self.asset_number()} column names, got {len(columns)}"
            )
        frame = pd.DataFrame(
            self._values.T.copy(), index=pd.Index(self._time_grid.times, name="time"), columns=columns
        )
        return frame

    def __repr__(self) -> str:
        return f"MultiPath(assets={self.asset_number()}, size={self.path_size()})"
