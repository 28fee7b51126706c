# mcpathgen/simulation/time_grid.py
"""Discretization of the simulation horizon."""

from typing import Iterator, Sequence

import numpy as np

from mcpathgen.exceptions.montecarlo_exceptions import InputValidationError


class TimeGrid:
    """
    Strictly increasing sequence of simulation instants t_0 < ... < t_{m-1}.

    The instants are stored in a read-only array; a grid is never modified
    after construction and can be shared by any number of paths and
    generators.
    """

    def __init__(self, times: Sequence[float]):
        times = np.array(times, dtype=float).ravel()
        if times.size == 0:
            raise InputValidationError("time grid needs at least one instant")
        if times.size > 1 and np.any(np.diff(times) <= 0.0):
            raise InputValidationError("time grid instants must be strictly increasing")
        times.setflags(write=False)
        self._times = times
        self._dt = np.diff(times)
        self._dt.setflags(write=False)

    @classmethod
    def from_horizon(cls, end: float, steps: int) -> "TimeGrid":
        """Equally spaced grid with ``steps + 1`` instants from 0 to ``end``."""
        if end <= 0:
            raise InputValidationError(f"horizon must be positive, got {end}")
        if steps <= 0:
            raise InputValidationError(f"number of steps must be positive, got {steps}")
        return cls(np.linspace(0.0, end, steps + 1))

    @property
    def times(self) -> np.ndarray:
        return self._times

    @property
    def dts(self) -> np.ndarray:
        return self._dt

    def dt(self, i: int) -> float:
        """Duration of step ``i``, i.e. t_{i+1} - t_i."""
        return float(self._dt[i])

    def front(self) -> float:
        return float(self._times[0])

    def back(self) -> float:
        return float(self._times[-1])

    def __len__(self) -> int:
        return self._times.size

    def __getitem__(self, i):
        return self._times[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self._times)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeGrid):
            return NotImplemented
        return np.array_equal(self._times, other._times)

    def __repr__(self) -> str:
        return f"TimeGrid(size={len(self)}, front={self.front()}, back={self.back()})"
