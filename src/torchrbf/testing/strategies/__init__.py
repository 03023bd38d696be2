"""Hypothesis strategies for RBF interpolation testing."""

from ._distances import distances
from ._scattered_points import scattered_points
from ._shape_parameters import shape_parameters

__all__ = [
    "distances",
    "scattered_points",
    "shape_parameters",
]
