"""Scattered data interpolation with radial basis functions.

Fits f(x) = Σ w_i φ(||x - x_i||) through values at scattered points in
any number of dimensions and evaluates it at new points.

Convenience Functions
---------------------
rbf_interpolate
    Fit an interpolant and return a callable.

Functional Interface
--------------------
rbf_fit
    Solve for the weights of an interpolant.
rbf_evaluate
    Evaluate an interpolant at query points.
rbf_gram_matrix
    Kernel matrix of a point set.
pairwise_distances
    Euclidean distances between two point sets.
find_duplicate_points
    Index pairs of coincident points.

Stateful Interface
------------------
RBFInterpolator
    Set data, compute weights, evaluate.

Kernels
-------
GaussianKernel
    exp(-θr²).
ThinPlateSplineKernel
    r² log(r), 0 at r = 0.
LinearKernel
    |r|.
InverseQuadraticKernel
    1/sqrt(r² + θ²).

Data Types
----------
RBFInterpolant
    Fitted centers, weights, and kernel parameters.

Exceptions
----------
RBFError
    Base exception for interpolation.
DimensionMismatchError
    Points, values, or queries with incompatible shapes.
InterpolatorStateError
    Interpolator operation called out of order.
NoDataError
    Weights requested before data was set.
NotFittedError
    Values requested before weights were computed.
SingularMatrixError
    Kernel system singular or too ill-conditioned.
DuplicatePointsError
    Coincident points without regularization.
RBFConditioningWarning
    Kernel system solved but poorly conditioned.
"""

from ._exceptions import (
    DimensionMismatchError,
    DuplicatePointsError,
    InterpolatorStateError,
    NoDataError,
    NotFittedError,
    RBFConditioningWarning,
    RBFError,
    SingularMatrixError,
)
from ._rbf import (
    KERNELS,
    KERNELS_WITH_THETA,
    POSITIVE_DEFINITE,
    GaussianKernel,
    InverseQuadraticKernel,
    LinearKernel,
    RBFInterpolant,
    RBFInterpolator,
    RBFKernel,
    ThinPlateSplineKernel,
    find_duplicate_points,
    pairwise_distances,
    rbf_evaluate,
    rbf_fit,
    rbf_gram_matrix,
    rbf_interpolate,
    rbf_kernel,
)

__all__ = [
    "KERNELS",
    "KERNELS_WITH_THETA",
    "POSITIVE_DEFINITE",
    "DimensionMismatchError",
    "DuplicatePointsError",
    "GaussianKernel",
    "InterpolatorStateError",
    "InverseQuadraticKernel",
    "LinearKernel",
    "NoDataError",
    "NotFittedError",
    "RBFConditioningWarning",
    "RBFError",
    "RBFInterpolant",
    "RBFInterpolator",
    "RBFKernel",
    "SingularMatrixError",
    "ThinPlateSplineKernel",
    "find_duplicate_points",
    "pairwise_distances",
    "rbf_evaluate",
    "rbf_fit",
    "rbf_gram_matrix",
    "rbf_interpolate",
    "rbf_kernel",
]
