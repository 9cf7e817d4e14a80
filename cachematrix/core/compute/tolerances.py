"""
Tolerance tiers for verifying computed inverses.

An inverse is checked by how close A @ A_inv comes to the identity. The
acceptable distance depends on the compute path:
- CPU FP64 (reference): LAPACK double precision
- GPU FP64: same as CPU
- GPU FP32: relaxed for single-precision arithmetic

Used by the test suite and by the GPU backend's condition check.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerances for one compute path."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision (LAPACK LU)',
)

GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision',
)

# Above this condition number an FP32 inverse keeps fewer than ~2
# significant digits, so the GPU backend refuses unless forced.
GPU_CONDITION_THRESHOLD = 1e5


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the tolerance tier matching a backend's name."""
    if 'gpu' in backend_name:
        if 'fp64' in backend_name:
            return GPU_FP64
        return GPU_FP32
    return CPU_FP64
