"""
CPU reference backend for matrix inversion.

Uses LU factorisation with partial pivoting via LAPACK (through SciPy),
the same method R's solve() uses.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from cachematrix.core.result import Result
from cachematrix.core.compute.timing import Timer
from cachematrix.core.compute.linalg.lu import inverse_cpu
from cachematrix.inverse._common import identity_residual, prepare_matrix
from cachematrix.inverse.solution import InverseParams


class CPULUBackend:
    """
    CPU backend using LU decomposition.

    Implements the InverseBackend protocol. This is the reference
    implementation; the GPU backend is validated against it.
    """

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, matrix: ArrayLike) -> Result[InverseParams]:
        """
        Invert a matrix via LU decomposition.

        Algorithm:
            1. Validate: numeric, finite, square, non-empty
            2. Factor PA = LU and check the numerical rank
            3. Solve A X = I for X

        Raises:
            ValidationError: If matrix is non-numeric or non-finite
            DimensionError: If matrix is not square, or empty
            SingularMatrixError: If matrix is singular
        """
        timer = Timer()
        timer.start()

        with timer.section('validation'):
            A = prepare_matrix(matrix)
        n = A.shape[0]

        try:
            with timer.section('lu_inverse'):
                inverse = inverse_cpu(A, matrix_name='matrix')
        finally:
            timer.stop()

        info: dict[str, Any] = {
            'method': 'lu',
            'n': n,
            'rank': n,
            'residual': identity_residual(A, inverse),
        }

        return Result(
            params=InverseParams(inverse=inverse, rank=n),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
