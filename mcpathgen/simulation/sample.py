# mcpathgen/simulation/sample.py

import copy
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Sample(Generic[T]):
    """A value drawn from a simulation together with its likelihood weight."""

    value: T
    weight: float = 1.0

    def copy(self) -> "Sample[T]":
        """Independent copy; use it to keep a generator result past the next call."""
        value = self.value.copy() if hasattr(self.value, "copy") else copy.deepcopy(self.value)
        return Sample(value, self.weight)
