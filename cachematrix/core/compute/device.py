"""
Device selection for the inversion backends.

PyTorch is optional: it is imported lazily, and without it the only
device is the CPU.
"""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class DeviceInfo:
    """Compute device a backend should run on ('cpu', 'cuda' or 'mps')."""
    device_type: Literal['cpu', 'cuda', 'mps']
    name: str

    @property
    def is_gpu(self) -> bool:
        return self.device_type != 'cpu'


CPU = DeviceInfo(device_type='cpu', name='CPU')


def detect_gpu() -> DeviceInfo | None:
    """Return the available GPU (CUDA preferred over MPS), or None."""
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        return DeviceInfo(
            device_type='cuda',
            name=torch.cuda.get_device_name(torch.cuda.current_device()),
        )
    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(device_type='mps', name='Apple Silicon GPU')
    return None


def select_device(prefer: Literal['gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Pick the device for an inversion.

    Args:
        prefer: 'gpu' requires a GPU, 'auto' uses one if available

    Raises:
        RuntimeError: If 'gpu' requested but no GPU available
    """
    gpu = detect_gpu()
    if gpu is not None:
        return gpu
    if prefer == 'gpu':
        raise RuntimeError(
            "GPU requested but no GPU available. "
            "Ensure PyTorch is installed with CUDA/MPS support."
        )
    return CPU
