"""
Linear algebra kernels for cachematrix.

Conventions:
    - CPU functions use SciPy (LAPACK under the hood)
    - GPU functions use PyTorch and return NumPy arrays (data moved to CPU)
    - Singularity is reported by raising SingularMatrixError, never by
      returning a partial result
"""

from cachematrix.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    inverse_cpu,
    inverse_gpu,
)

__all__ = [
    "LUResult",
    "lu_cpu",
    "inverse_cpu",
    "inverse_gpu",
]
