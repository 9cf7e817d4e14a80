"""
Payload produced by the inversion backends.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for a matrix inversion.

    Attributes:
        inverse: The inverse matrix (n x n), float64
        rank: Numerical rank of the inverted matrix (equals n on success)
    """
    inverse: NDArray[np.floating[Any]]
    rank: int

    @property
    def n(self) -> int:
        return self.inverse.shape[0]
