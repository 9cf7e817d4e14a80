"""
Cached matrix inversion.

Public API:
    CachedMatrix(data)        - matrix holder with a lazily cached inverse
    resolve_inverse(holder)   - inverse of the holder's matrix, computed once
                                per matrix value
"""

from cachematrix.inverse.design import CachedMatrix
from cachematrix.inverse.solution import InverseParams
from cachematrix.inverse.solvers import resolve_inverse

__all__ = [
    "CachedMatrix",
    "InverseParams",
    "resolve_inverse",
]
