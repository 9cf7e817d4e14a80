"""
CachedMatrix: a matrix together with its lazily computed inverse.

The holder owns two pieces of state: the current matrix and an optional
cached inverse. Replacing the matrix clears the cache before control
returns to the caller, so a cached inverse always belongs to the current
matrix.

The cache is written only by resolve_inverse() in
cachematrix.inverse.solvers, through the module-internal _set_inverse().
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from cachematrix.core.exceptions import ValidationError


def _frozen_copy(data: ArrayLike, name: str) -> NDArray[Any]:
    try:
        arr = np.array(data, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    arr.flags.writeable = False
    return arr


class CachedMatrix:
    """
    Mutable holder for a matrix and its cached inverse.

    The stored matrix is a private read-only copy: mutating the array that
    was passed to set() afterwards cannot desynchronise the cache.

    Construction:
        CachedMatrix([[1, 2], [3, 4]])
        CachedMatrix()  # empty 0 x 0 placeholder; has no inverse

    Example:
        >>> m = CachedMatrix([[1.0, 2.0], [3.0, 4.0]])
        >>> resolve_inverse(m)        # computed
        >>> resolve_inverse(m)        # cached, logs "getting cached data"
        >>> m.set([[0.0, 1.0], [2.0, 3.0]])
        >>> m.get_inverse() is None
        True
    """

    def __init__(self, data: ArrayLike | None = None):
        if data is None:
            data = np.empty((0, 0), dtype=np.float64)
        self._data: NDArray[Any] = _frozen_copy(data, "data")
        self._inverse: NDArray[Any] | None = None

    def set(self, new_data: ArrayLike) -> None:
        """
        Replace the matrix and invalidate the cached inverse.

        The cache is cleared unconditionally, even when new_data equals
        the current matrix.

        Raises:
            ValidationError: If new_data cannot be converted to an array
        """
        self._data = _frozen_copy(new_data, "new_data")
        self._inverse = None

    def get(self) -> NDArray[Any]:
        """Return the current matrix (read-only)."""
        return self._data

    def get_inverse(self) -> NDArray[Any] | None:
        """Return the cached inverse, or None if not computed for the current matrix."""
        return self._inverse

    def _set_inverse(self, inverse: NDArray[Any]) -> None:
        # Trusted: the caller must have just inverted the current matrix.
        # Private copy: the backend keeps ownership of the array it returned.
        inverse = np.array(inverse, copy=True)
        inverse.flags.writeable = False
        self._inverse = inverse

    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        state = "cached" if self._inverse is not None else "not cached"
        return f"CachedMatrix(shape={self._data.shape}, inverse={state})"
