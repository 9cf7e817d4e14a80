"""
GPU backend for matrix inversion using PyTorch.

Performance path for large matrices, validated against the CPU reference.
Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon).
"""

from typing import Any
import warnings

from numpy.typing import ArrayLike

from cachematrix.core.result import Result
from cachematrix.core.exceptions import NumericalError, SingularMatrixError
from cachematrix.core.compute.timing import Timer
from cachematrix.core.compute.tolerances import GPU_CONDITION_THRESHOLD
from cachematrix.core.compute.linalg.lu import inverse_gpu
from cachematrix.inverse._common import identity_residual, prepare_matrix
from cachematrix.inverse.solution import InverseParams


class GPUInverseBackend:
    """
    GPU backend using PyTorch for matrix inversion.

    FP32 by default for throughput on consumer GPUs. In FP32 an
    ill-conditioned matrix loses most of its significant digits, so such
    matrices are refused unless force=True.
    """

    def __init__(self, use_fp64: bool = False, device: str = 'cuda'):
        """
        Args:
            use_fp64: If True, use FP64 (slow on consumer GPUs).
            device: GPU device type ('cuda', 'cuda:0', 'mps')
        """
        import torch

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
            self.device = torch.device(device)
            self.dtype = torch.float64 if use_fp64 else torch.float32
            self.use_fp64 = use_fp64

        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            if use_fp64:
                raise RuntimeError(
                    "MPS does not support float64. Use use_fp64=False "
                    "or use backend='cpu' for double precision."
                )
            self.device = torch.device('mps')
            self.dtype = torch.float32
            self.use_fp64 = False

        else:
            raise ValueError(
                f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'."
            )

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_inv_{precision}'

    def solve(self, matrix: ArrayLike, force: bool = False) -> Result[InverseParams]:
        """
        Invert a matrix on the GPU.

        Args:
            matrix: Square matrix to invert
            force: If True, invert even when the condition number exceeds
                GPU_CONDITION_THRESHOLD.

        Raises:
            ValidationError: If matrix is non-numeric or non-finite
            DimensionError: If matrix is not square, or empty
            SingularMatrixError: If matrix is numerically singular
            NumericalError: If matrix is ill-conditioned and force=False
        """
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        with timer.section('validation'):
            A_np = prepare_matrix(matrix)
        n = A_np.shape[0]

        with timer.section('data_transfer_to_gpu'):
            A = torch.tensor(A_np, device=self.device, dtype=self.dtype)

        # svdvals is not implemented on MPS; fall back to CPU for this check
        with timer.section('condition_check'):
            try:
                sv = torch.linalg.svdvals(A)
            except (NotImplementedError, RuntimeError):
                sv = torch.linalg.svdvals(A.cpu())
            sv_max = float(sv[0].item())
            sv_min = float(sv[-1].item())
            cond = sv_max / sv_min if sv_min > 0 else float('inf')
            threshold = n * torch.finfo(self.dtype).eps * sv_max
            rank = int((sv > threshold).sum().item())

        if rank < n:
            timer.stop()
            raise SingularMatrixError(
                f"matrix is singular: rank={rank}, expected={n}. "
                f"The matrix has no inverse.",
                matrix_name='matrix',
                condition_number=cond,
                rank=rank,
                expected_rank=n,
            )

        if cond > GPU_CONDITION_THRESHOLD and not force:
            timer.stop()
            raise NumericalError(
                f"matrix is ill-conditioned (condition number: {cond:.2e}). "
                f"A {self.name} inverse is likely to be inaccurate.\n"
                f"Options:\n"
                f"  - Use backend='cpu' for the FP64 LU reference\n"
                f"  - Pass force=True to invert on the GPU anyway"
            )

        warnings_list = []
        if cond > GPU_CONDITION_THRESHOLD:
            msg = (
                f"Inverting ill-conditioned matrix (condition number: {cond:.2e}) "
                f"with force=True; expect reduced accuracy."
            )
            warnings.warn(msg)
            warnings_list.append(msg)

        with timer.section('inverse'):
            inverse = inverse_gpu(A, matrix_name='matrix')

        timer.stop()

        info: dict[str, Any] = {
            'method': 'lu',
            'n': n,
            'rank': rank,
            'condition_number': cond,
            'residual': identity_residual(A_np, inverse),
            'device': str(self.device),
        }

        return Result(
            params=InverseParams(inverse=inverse, rank=rank),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
