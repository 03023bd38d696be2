"""RBF interpolant fitting."""

from __future__ import annotations

import math
import warnings
from typing import TYPE_CHECKING, Optional, Tuple, Union

import torch
from torch import Tensor

from .._exceptions import (
    DuplicatePointsError,
    RBFConditioningWarning,
    SingularMatrixError,
)
from ._rbf_distance import (
    find_duplicate_points,
    rbf_gram_matrix,
    validate_data,
)
from ._rbf_kernels import RBFKernel, rbf_kernel

if TYPE_CHECKING:
    from ._rbf import RBFInterpolant

# Systems with condition number above CONDITION_LIMIT / eps are rejected,
# above CONDITION_WARNING / eps they are solved with a warning.
CONDITION_LIMIT = 1e-2
CONDITION_WARNING = 1e-6


def rbf_fit(
    points: Tensor,
    values: Tensor,
    kernel: Union[str, RBFKernel] = "thin_plate",
    theta: Optional[float] = None,
    regularization: float = 0.0,
) -> RBFInterpolant:
    """
    Fit an RBF interpolant to scattered data.

    Parameters
    ----------
    points : Tensor
        Data point locations, shape (n, dim).
    values : Tensor
        Data values, shape (n,) or (n, *value_shape).
    kernel : str or RBFKernel
        RBF kernel name or instance.
    theta : float, optional
        Shape parameter when ``kernel`` is a name. Default is 1.0 for
        kernels that take one.
    regularization : float
        Ridge parameter λ >= 0. Zero requests exact interpolation.

    Returns
    -------
    rbf : RBFInterpolant
        Fitted RBF interpolant.

    Raises
    ------
    DimensionMismatchError
        If points and values have incompatible shapes.
    DuplicatePointsError
        If two points coincide and ``regularization`` is zero.
    SingularMatrixError
        If the system is singular or too ill-conditioned to solve.

    Notes
    -----
    The system solved is:
    (K + λI) w = f

    where K is the kernel matrix, w are the RBF weights and λ is the
    regularization parameter. Positive definite kernels (gaussian,
    inverse_quadratic) are solved by Cholesky factorization; the others,
    and any matrix the Cholesky factorization rejects, by LU
    factorization with partial pivoting.
    """
    from ._rbf import RBFInterpolant

    kernel = rbf_kernel(kernel, theta)
    points, values = validate_data(points, values)

    regularization = float(regularization)
    if not (math.isfinite(regularization) and regularization >= 0):
        raise ValueError(
            f"regularization must be finite and non-negative, "
            f"got {regularization}"
        )

    n = points.shape[0]

    # Handle value shape
    if values.dim() == 1:
        value_shape = ()
        values_2d = values.unsqueeze(-1)  # (n, 1)
    else:
        value_shape = values.shape[1:]
        values_2d = values.reshape(n, -1)  # (n, num_values)

    if regularization == 0:
        duplicates = find_duplicate_points(points)
        if duplicates.shape[0] > 0:
            raise DuplicatePointsError(duplicates.tolist())

    # Build kernel matrix
    K = rbf_gram_matrix(points, kernel)

    # Add regularization
    if regularization > 0:
        K = K + regularization * torch.eye(n, dtype=K.dtype, device=K.device)

    weights, condition_number = _solve(K, values_2d, kernel.positive_definite)

    if value_shape:
        weights = weights.reshape(n, *value_shape)
    else:
        weights = weights.squeeze(-1)

    return RBFInterpolant(
        centers=points.clone(),
        weights=weights,
        kernel=kernel,
        theta=kernel.theta if kernel.theta is not None else 0.0,
        regularization=regularization,
        condition_number=condition_number,
        batch_size=[],
    )


def _solve(
    K: Tensor, rhs: Tensor, positive_definite: bool
) -> Tuple[Tensor, float]:
    """Solve the symmetric kernel system K w = rhs.

    Parameters
    ----------
    K : Tensor
        Symmetric kernel matrix, shape (n, n).
    rhs : Tensor
        Right-hand sides, shape (n, k).
    positive_definite : bool
        Whether K is expected to be positive definite.

    Returns
    -------
    weights : Tensor
        Solution, shape (n, k).
    condition_number : float
        2-norm condition number of K.
    """
    eps = torch.finfo(K.dtype).eps

    condition_number = torch.linalg.cond(K).item()

    if not math.isfinite(condition_number):
        raise SingularMatrixError(condition_number)

    if condition_number > CONDITION_LIMIT / eps:
        raise SingularMatrixError(condition_number, reason="ill-conditioned")

    if condition_number > CONDITION_WARNING / eps:
        warnings.warn(
            f"Kernel matrix is poorly conditioned "
            f"(condition number = {condition_number:.2e}). "
            f"Weights may be inaccurate; consider regularization.",
            RBFConditioningWarning,
        )

    weights = None

    if positive_definite:
        L, info = torch.linalg.cholesky_ex(K)
        if info.item() == 0:
            weights = torch.cholesky_solve(rhs, L)
        else:
            warnings.warn(
                "Cholesky factorization of the kernel matrix failed; "
                "falling back to LU factorization.",
                RBFConditioningWarning,
            )

    if weights is None:
        LU, pivots, info = torch.linalg.lu_factor_ex(K)
        if info.item() != 0:
            raise SingularMatrixError(condition_number)
        weights = torch.linalg.lu_solve(LU, pivots, rhs)

    if not torch.isfinite(weights).all():
        raise SingularMatrixError(condition_number, reason="ill-conditioned")

    return weights, condition_number
