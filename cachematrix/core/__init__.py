"""
Core infrastructure for cachematrix.

Key components:
    protocols: InverseBackend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, device detection, LU kernels
"""

from cachematrix.core.protocols import InverseBackend
from cachematrix.core.result import Result
from cachematrix.core.exceptions import (
    CacheMatrixError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "InverseBackend",
    # Result
    "Result",
    # Exceptions
    "CacheMatrixError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
