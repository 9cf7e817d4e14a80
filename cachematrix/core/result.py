"""
Generic result container returned by inversion backends.

Every backend wraps its payload in the same envelope so the solver
dispatch can log timing and backend identity without knowing which
backend ran.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, rank, condition number)
    - timing is optional (mock backends in tests need not measure)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a backend computation.

    Attributes:
        params: Domain-specific payload (the inverse, for InverseParams)
        info: Structured metadata (method, n, rank, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InverseParams(inverse=inv),
        ...     info={'method': 'lu', 'n': 2, 'rank': 2},
        ...     timing={'total_seconds': 1e-4, 'lu_factor': 5e-5},
        ...     backend_name='cpu_lu'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
