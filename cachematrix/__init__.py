"""
cachematrix: matrix inversion with a cached result.

Inverting a matrix can be expensive. A CachedMatrix keeps the inverse of
its current matrix after the first computation and hands it back on
later requests, until the matrix is replaced.

    >>> from cachematrix import CachedMatrix, resolve_inverse
    >>> m = CachedMatrix([[1.0, 2.0], [3.0, 4.0]])
    >>> resolve_inverse(m)   # computed
    >>> resolve_inverse(m)   # cached

Submodules:
    inverse: CachedMatrix and resolve_inverse
    core: exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from cachematrix.core.exceptions import (
    CacheMatrixError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from cachematrix.inverse import CachedMatrix, resolve_inverse

__all__ = [
    "__version__",
    "CachedMatrix",
    "resolve_inverse",
    "CacheMatrixError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
