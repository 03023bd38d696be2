"""Pairwise distances, kernel matrices, and input validation."""

from __future__ import annotations

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from .._exceptions import DimensionMismatchError
from ._rbf_kernels import RBFKernel, rbf_kernel


def as_float_tensor(
    x,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Convert ``x`` to a floating point tensor.

    Tensors keep their floating dtype and device unless ``dtype`` or
    ``device`` is given; integer tensors and non-tensor inputs become
    float64.
    """
    if not isinstance(x, Tensor):
        x = torch.as_tensor(x, dtype=torch.float64)
    elif not x.is_floating_point():
        x = x.to(torch.float64)

    if dtype is not None or device is not None:
        x = x.to(dtype=dtype, device=device)

    return x


def validate_data(points, values) -> Tuple[Tensor, Tensor]:
    """Check and coerce a scattered data set.

    Parameters
    ----------
    points : Tensor or array_like
        Data point locations, shape (n, dim), one point per row.
    values : Tensor or array_like
        Data values, shape (n,) or (n, *value_shape).

    Returns
    -------
    points : Tensor
        Points, shape (n, dim).
    values : Tensor
        Values with the dtype and device of the points.

    Raises
    ------
    DimensionMismatchError
        If the shapes of points and values are incompatible.
    ValueError
        If points or values are not finite.
    """
    points = as_float_tensor(points)

    if points.dim() != 2:
        raise DimensionMismatchError(
            f"points must have shape (n, dim), got {tuple(points.shape)}"
        )

    n, dim = points.shape

    if n < 1:
        raise DimensionMismatchError("Need at least 1 data point")

    if dim < 1:
        raise DimensionMismatchError("points must have at least 1 dimension")

    values = as_float_tensor(values, dtype=points.dtype, device=points.device)

    if values.dim() == 0 or values.shape[0] != n:
        raise DimensionMismatchError(
            f"values must have leading dimension {n} to match points, "
            f"got shape {tuple(values.shape)}"
        )

    if not torch.isfinite(points).all():
        raise ValueError("points must be finite")

    if not torch.isfinite(values).all():
        raise ValueError("values must be finite")

    return points, values


def pairwise_distances(a: Tensor, b: Tensor) -> Tensor:
    """Euclidean distances between the rows of ``a`` and ``b``.

    Parameters
    ----------
    a : Tensor
        Points, shape (m, dim).
    b : Tensor
        Points, shape (n, dim).

    Returns
    -------
    Tensor
        Distances, shape (m, n).

    Notes
    -----
    Distances are computed from explicit differences rather than the
    expansion ``|a|² + |b|² - 2ab``, so coincident points are exactly 0
    and ``pairwise_distances(x, x)`` is exactly symmetric.
    """
    if a.shape[-1] != b.shape[-1]:
        raise DimensionMismatchError(
            f"Dimension mismatch: {a.shape[-1]} and {b.shape[-1]}"
        )

    diff = a.unsqueeze(1) - b.unsqueeze(0)  # (m, n, dim)

    return torch.linalg.vector_norm(diff, dim=-1)


def rbf_gram_matrix(
    points: Tensor,
    kernel: Union[str, RBFKernel] = "thin_plate",
    theta: Optional[float] = None,
) -> Tensor:
    """Kernel (Gram) matrix of a point set.

    Parameters
    ----------
    points : Tensor
        Points, shape (n, dim).
    kernel : str or RBFKernel
        Kernel name or instance.
    theta : float, optional
        Shape parameter when ``kernel`` is a name.

    Returns
    -------
    Tensor
        Matrix Φ with ``Φ[i, j] = φ(|x_j - x_i|)``, shape (n, n).
    """
    kernel = rbf_kernel(kernel, theta)
    points = as_float_tensor(points)

    return kernel(pairwise_distances(points, points))


def find_duplicate_points(points: Tensor) -> Tensor:
    """Find pairs of coincident points.

    Parameters
    ----------
    points : Tensor
        Points, shape (n, dim).

    Returns
    -------
    Tensor
        Index pairs ``(i, j)`` with ``i < j`` and zero distance between
        points i and j, shape (k, 2), in row-major order.
    """
    points = as_float_tensor(points)

    distances = pairwise_distances(points, points)
    coincident = torch.triu(distances == 0, diagonal=1)

    return torch.nonzero(coincident)
