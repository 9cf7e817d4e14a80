"""
Inversion backends.

Available backends:
    CPULUBackend: CPU reference implementation using LU decomposition
    GPUInverseBackend: GPU implementation using PyTorch (imported lazily)
"""

from cachematrix.inverse.backends.cpu import CPULUBackend

__all__ = [
    "CPULUBackend",
]
