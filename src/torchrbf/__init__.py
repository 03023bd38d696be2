"""torchrbf: radial basis function interpolation for PyTorch tensors."""

from . import interpolation

__all__ = [
    "interpolation",
]

__version__ = "0.1.0"
