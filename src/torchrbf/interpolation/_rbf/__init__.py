"""Radial Basis Function interpolation for scattered data."""

from ._rbf import RBFInterpolant, rbf_interpolate
from ._rbf_distance import (
    find_duplicate_points,
    pairwise_distances,
    rbf_gram_matrix,
)
from ._rbf_evaluate import rbf_evaluate
from ._rbf_fit import rbf_fit
from ._rbf_interpolator import RBFInterpolator
from ._rbf_kernels import (
    KERNELS,
    KERNELS_WITH_THETA,
    POSITIVE_DEFINITE,
    GaussianKernel,
    InverseQuadraticKernel,
    LinearKernel,
    RBFKernel,
    ThinPlateSplineKernel,
    rbf_kernel,
)

__all__ = [
    "KERNELS",
    "KERNELS_WITH_THETA",
    "POSITIVE_DEFINITE",
    "GaussianKernel",
    "InverseQuadraticKernel",
    "LinearKernel",
    "RBFInterpolant",
    "RBFInterpolator",
    "RBFKernel",
    "ThinPlateSplineKernel",
    "find_duplicate_points",
    "pairwise_distances",
    "rbf_evaluate",
    "rbf_fit",
    "rbf_gram_matrix",
    "rbf_interpolate",
    "rbf_kernel",
]
