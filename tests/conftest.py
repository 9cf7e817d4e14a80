"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from cachematrix.inverse.backends.cpu import CPULUBackend


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Random 6 x 6 matrix made diagonally dominant (safely invertible)."""
    n = 6
    A = rng.standard_normal((n, n))
    return A + n * np.eye(n)


class CountingBackend:
    """CPU LU backend that counts how often the solver is invoked."""

    def __init__(self):
        self.calls = 0
        self._inner = CPULUBackend()

    @property
    def name(self) -> str:
        return 'counting_cpu_lu'

    def solve(self, matrix):
        self.calls += 1
        return self._inner.solve(matrix)


@pytest.fixture
def counting_backend():
    return CountingBackend()
