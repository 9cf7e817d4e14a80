"""
LU factorisation and matrix inverse kernels.

CPU kernels use SciPy (LAPACK getrf/gecon/getrs). A matrix is treated as
singular when the U diagonal is rank-deficient or when its estimated
reciprocal condition number falls below machine epsilon, the same test
R's solve() applies. The GPU kernel uses PyTorch and returns a NumPy
array (data moved back to the CPU).
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import warnings

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, get_lapack_funcs, lu_factor, lu_solve

from cachematrix.core.exceptions import SingularMatrixError

if TYPE_CHECKING:
    import torch


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU factorisation with partial pivoting.

    Attributes:
        lu: Packed factors (L below the diagonal, unit diagonal implied; U on
            and above the diagonal), as returned by LAPACK getrf
        piv: Pivot indices
        rank: Numerical rank determined from the U diagonal
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    rank: int


def lu_cpu(A: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU factorisation using LAPACK (via SciPy).

    Computes PA = LU. LAPACK only warns on an exactly zero pivot, so the
    rank is taken from the U diagonal with tolerance n * eps * max|u_ii|.

    Args:
        A: Square matrix (n x n), float dtype

    Returns:
        LUResult with packed factors, pivots and numerical rank
    """
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(A, check_finite=False)

    diag_U = np.abs(np.diag(lu))
    if len(diag_U) > 0 and diag_U.max() > 0:
        tol = A.shape[0] * np.finfo(lu.dtype).eps * diag_U.max()
        rank = int(np.sum(diag_U > tol))
    else:
        rank = 0

    return LUResult(lu=lu, piv=piv, rank=rank)


def rcond_cpu(A: NDArray[np.floating[Any]], lu_result: LUResult) -> float:
    """
    Estimate the reciprocal 1-norm condition number from LU factors.

    Uses LAPACK gecon. Only meaningful for a full-rank factorisation.
    """
    gecon, = get_lapack_funcs(('gecon',), (lu_result.lu,))
    anorm = float(np.linalg.norm(A, 1))
    rcond, info = gecon(lu_result.lu, anorm, norm='1')
    if info != 0:
        raise ValueError(f"gecon: illegal value in argument {-info}")
    return float(rcond)


def inverse_cpu(
    A: NDArray[np.floating[Any]],
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix via LU factorisation (CPU).

    The inverse is obtained by solving A X = I against the LU factors.

    Args:
        A: Square, finite matrix (n x n)
        matrix_name: Name used in error messages

    Returns:
        The inverse (n x n), same float dtype as A

    Raises:
        SingularMatrixError: If A is numerically rank-deficient, or its
            reciprocal condition number is below machine epsilon
    """
    n = A.shape[0]
    lu_result = lu_cpu(A)

    if lu_result.rank < n:
        raise SingularMatrixError(
            f"{matrix_name} is singular: rank={lu_result.rank}, expected={n}. "
            f"The matrix has no inverse.",
            matrix_name=matrix_name,
            rank=lu_result.rank,
            expected_rank=n,
        )

    rcond = rcond_cpu(A, lu_result)
    eps = float(np.finfo(lu_result.lu.dtype).eps)
    if rcond < eps:
        raise SingularMatrixError(
            f"{matrix_name} is computationally singular: reciprocal condition "
            f"number = {rcond:.6g}, below machine epsilon {eps:.3g}.",
            matrix_name=matrix_name,
            condition_number=1.0 / rcond if rcond > 0 else float('inf'),
            rank=lu_result.rank,
            expected_rank=n,
        )

    identity = np.eye(n, dtype=A.dtype)
    return lu_solve((lu_result.lu, lu_result.piv), identity, check_finite=False)


def inverse_gpu(
    A: 'torch.Tensor',
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix using PyTorch (GPU-accelerated).

    Args:
        A: Square tensor (n x n), already on the desired device
        matrix_name: Name used in error messages

    Returns:
        The inverse as a float64 NumPy array (moved to CPU)

    Raises:
        SingularMatrixError: If the device LU hits a zero pivot
    """
    import torch

    inverse, info = torch.linalg.inv_ex(A)
    if int(info.item()) != 0:
        n = A.shape[0]
        raise SingularMatrixError(
            f"{matrix_name} is singular: zero pivot at position {int(info.item())} "
            f"of {n}. The matrix has no inverse.",
            matrix_name=matrix_name,
            expected_rank=n,
        )

    return inverse.cpu().numpy().astype(np.float64)
