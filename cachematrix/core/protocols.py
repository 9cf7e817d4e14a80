"""
Core protocols for cachematrix.

Structural (Protocol) rather than nominal (ABC) typing: any object with a
``name`` and a ``solve(matrix)`` method can serve as the inversion
solver, which is how tests inject counting mocks.
"""

from typing import Protocol, Any, TYPE_CHECKING, runtime_checkable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from cachematrix.core.result import Result
    from cachematrix.inverse.solution import InverseParams


@runtime_checkable
class InverseBackend(Protocol):
    """
    Protocol for matrix inversion backends.

    Backends are stateless with respect to the matrices they invert: all
    configuration is fixed at construction time. They validate their
    input, compute the inverse, and either return a Result or raise.
    Nothing is cached at this level; caching is CachedMatrix's job.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_lu', 'gpu_inv_fp32'.
        """
        ...

    def solve(self, matrix: NDArray[np.floating[Any]]) -> 'Result[InverseParams]':
        """
        Invert a square matrix.

        Raises:
            ValidationError: If matrix is non-numeric or non-finite
            DimensionError: If matrix is not square, or empty
            SingularMatrixError: If matrix is not invertible
        """
        ...
