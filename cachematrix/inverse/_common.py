"""
Input preparation shared by the inversion backends.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from cachematrix.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_square,
)


def prepare_matrix(matrix: ArrayLike, name: str = 'matrix') -> NDArray[np.float64]:
    """
    Validate a matrix for inversion and return it as float64.

    Shape is checked before values so that a non-square matrix reports
    DimensionError even when it also holds NaN.

    Raises:
        ValidationError: If matrix is non-numeric or has NaN/Inf entries
        DimensionError: If matrix is not 2D, not square, or empty
    """
    arr = check_array(matrix, name)
    check_2d(arr, name)
    check_square(arr, name)
    check_finite(arr, name)
    return arr.astype(np.float64, copy=False)


def identity_residual(
    matrix: NDArray[np.floating[Any]],
    inverse: NDArray[np.floating[Any]],
) -> float:
    """Max absolute deviation of matrix @ inverse from the identity."""
    n = matrix.shape[0]
    return float(np.max(np.abs(matrix @ inverse - np.eye(n))))
