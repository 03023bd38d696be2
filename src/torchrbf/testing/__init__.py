"""Testing utilities for radial basis function interpolation."""

from . import strategies

__all__ = [
    "strategies",
]
