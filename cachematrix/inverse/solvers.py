"""
Cached inverse resolution.

This module provides resolve_inverse() (public API) and backend selection.
The inverse of a CachedMatrix is computed at most once per matrix value:
the first call runs a backend and stores the result on the holder, later
calls return the stored inverse until CachedMatrix.set() replaces the
matrix.

Not thread-safe: the check-compute-store sequence is not atomic. Callers
sharing one holder across threads must serialise resolve_inverse() calls
themselves.
"""

import logging
from typing import Literal, Union

import numpy as np
from numpy.typing import NDArray

from cachematrix.core.compute.device import select_device
from cachematrix.core.exceptions import NumericalError, SingularMatrixError
from cachematrix.core.protocols import InverseBackend
from cachematrix.inverse.design import CachedMatrix
from cachematrix.inverse.backends.cpu import CPULUBackend
from cachematrix.inverse.backends.gpu import GPUInverseBackend

logger = logging.getLogger(__name__)

# Below this order the host-device transfer costs more than the inverse
GPU_MIN_ORDER = 1024

BackendChoice = Literal['auto', 'cpu', 'gpu', 'cpu_lu']


def resolve_inverse(
    holder: CachedMatrix,
    *,
    backend: Union[BackendChoice, InverseBackend] = 'auto',
    force: bool = False,
) -> NDArray[np.floating]:
    """
    Return the inverse of the holder's matrix, computing it only if needed.

    On a cache hit the stored inverse is returned as-is and "getting cached
    data" is logged at INFO; no backend runs and backend/force are ignored.
    On a miss the selected backend inverts holder.get(), the result is
    stored on the holder, and returned.

    Args:
        holder: The CachedMatrix to resolve
        backend: Computational backend to use on a miss:
            - 'auto': GPU for matrices of order >= GPU_MIN_ORDER when a GPU
              is available (FP64 on CUDA), otherwise CPU. If the GPU refuses
              an ill-conditioned matrix the CPU reference inverts it instead.
            - 'cpu' / 'cpu_lu': CPU LU decomposition (reference)
            - 'gpu': GPU backend (requires PyTorch with CUDA/MPS)
            - any object implementing InverseBackend
        force: GPU only. Invert even if the matrix is ill-conditioned.

    Returns:
        The inverse matrix (read-only array)

    Raises:
        ValidationError: If the matrix is non-numeric or non-finite
        DimensionError: If the matrix is not square, or empty
        SingularMatrixError: If the matrix is not invertible
        NumericalError: If an explicitly chosen GPU backend refuses an
            ill-conditioned matrix
        ValueError: If backend is not recognised

    Example:
        >>> m = CachedMatrix([[1.0, 2.0], [3.0, 4.0]])
        >>> resolve_inverse(m)
        array([[-2. ,  1.5],
               [ 1. , -0.5]])
    """
    cached = holder.get_inverse()
    if cached is not None:
        logger.info("getting cached data")
        return cached

    matrix = holder.get()
    backend_impl = _get_backend(backend, matrix)

    # Errors propagate unchanged and leave the cache empty, except that
    # 'auto' retries a GPU ill-conditioning refusal on the CPU
    try:
        result = _solve(backend_impl, matrix, force)
    except SingularMatrixError:
        raise
    except NumericalError as e:
        if backend != 'auto' or not isinstance(backend_impl, GPUInverseBackend):
            raise
        logger.warning(
            "backend %s refused the matrix, falling back to cpu_lu: %s",
            backend_impl.name, e,
        )
        result = CPULUBackend().solve(matrix)

    inverse = result.params.inverse
    holder._set_inverse(inverse)

    total = result.timing['total_seconds'] if result.timing else None
    logger.debug(
        "computed inverse of %s matrix with backend %s (%s s)",
        matrix.shape, result.backend_name, total,
    )
    return holder.get_inverse()


def _solve(backend_impl: InverseBackend, matrix: NDArray, force: bool):
    if force and isinstance(backend_impl, GPUInverseBackend):
        return backend_impl.solve(matrix, force=True)
    return backend_impl.solve(matrix)


def _get_backend(
    choice: Union[BackendChoice, InverseBackend],
    matrix: NDArray,
) -> InverseBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if not isinstance(choice, str):
        if isinstance(choice, InverseBackend):
            return choice
        raise ValueError(f"Unknown backend: {choice!r}")

    if choice == 'auto':
        order = matrix.shape[0] if matrix.ndim == 2 else 0
        if order >= GPU_MIN_ORDER:
            device = select_device('auto')
            if device.is_gpu:
                return GPUInverseBackend(
                    use_fp64=device.device_type == 'cuda',
                    device=device.device_type,
                )
        return CPULUBackend()

    elif choice in ('cpu', 'cpu_lu'):
        return CPULUBackend()

    elif choice == 'gpu':
        device = select_device('gpu')
        return GPUInverseBackend(device=device.device_type)

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
