"""RBF interpolant evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from .._exceptions import DimensionMismatchError
from ._rbf_distance import as_float_tensor, pairwise_distances

if TYPE_CHECKING:
    from ._rbf import RBFInterpolant


def rbf_evaluate(
    rbf: RBFInterpolant,
    query: Tensor,
) -> Tensor:
    """
    Evaluate an RBF interpolant at query points.

    Parameters
    ----------
    rbf : RBFInterpolant
        The RBF interpolant.
    query : Tensor
        Query points, shape (m, dim) or (m,) for 1D.

    Returns
    -------
    result : Tensor
        Interpolated values, shape (m, *value_shape).

    Raises
    ------
    DimensionMismatchError
        If the query dimension differs from the center dimension.
    """
    centers = rbf.centers  # (n, dim)
    weights = rbf.weights  # (n, *value_shape)

    n, dim = centers.shape

    query = as_float_tensor(query, dtype=centers.dtype, device=centers.device)

    # Handle 1D query
    if query.dim() == 1 and dim == 1:
        query = query.unsqueeze(-1)

    if query.dim() != 2 or query.shape[-1] != dim:
        raise DimensionMismatchError(
            f"query must have shape (m, {dim}), got {tuple(query.shape)}"
        )

    m = query.shape[0]

    value_shape = weights.shape[1:]
    weights_2d = weights.reshape(n, -1)  # (n, num_values)

    # Compute distances from query points to centers and evaluate kernel
    K = rbf.kernel(pairwise_distances(query, centers))  # (m, n)

    result = K @ weights_2d  # (m, num_values)

    return result.reshape(m, *value_shape)
