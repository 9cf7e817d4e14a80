"""
Exception hierarchy for cachematrix.

All exceptions inherit from CacheMatrixError so callers can catch any
library-specific error in one place. Solver failures surface to the
caller of resolve_inverse() unchanged.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual vs expected values
    - Never catch and re-raise with less information
"""


class CacheMatrixError(Exception):
    """Base exception for all cachematrix errors."""
    pass


class ValidationError(CacheMatrixError):
    """
    Input validation failed.

    Raised when a matrix handed to the solver cannot be used at all
    (non-numeric, NaN/Inf entries).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when the matrix is not 2-D, not square, or empty. These
    matrices have no inverse regardless of their values.
    """
    pass


class NumericalError(CacheMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising during the inversion itself.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Rank required for invertibility (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
