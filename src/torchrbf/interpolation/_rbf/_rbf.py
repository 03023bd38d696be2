"""RBF interpolant representation and convenience function."""

from typing import Callable, Optional, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._rbf_kernels import RBFKernel


@tensorclass
class RBFInterpolant:
    """Fitted Radial Basis Function interpolant for scattered data.

    The interpolant has the form:
    f(x) = Σ w_i φ(||x - c_i||)

    where φ is the RBF kernel, w_i are weights and c_i are centers
    (the data points).

    Attributes
    ----------
    centers : Tensor
        Center locations, shape (n, dim).
    weights : Tensor
        RBF weights, shape (n, *value_shape).
    kernel : RBFKernel
        Kernel the weights were solved with; evaluation uses the same
        instance.
    theta : float
        Shape parameter (0.0 for kernels without one).
    regularization : float
        Ridge term λ added to the kernel matrix diagonal (0.0 for exact
        interpolation).
    condition_number : float
        2-norm condition number of the solved system.
    """

    centers: Tensor
    weights: Tensor
    kernel: RBFKernel
    theta: float
    regularization: float
    condition_number: float


def rbf_interpolate(
    points: Tensor,
    values: Tensor,
    kernel: Union[str, RBFKernel] = "thin_plate",
    theta: Optional[float] = None,
    regularization: float = 0.0,
) -> Callable[[Tensor], Tensor]:
    """Create an RBF interpolator for scattered data.

    This is a convenience function that fits an RBF interpolant and
    returns a callable that evaluates it.

    Parameters
    ----------
    points : Tensor
        Data point locations, shape (n, dim).
    values : Tensor
        Data values, shape (n,) or (n, *value_shape).
    kernel : str or RBFKernel, optional
        RBF kernel. One of:

        - ``"thin_plate"``: r² log(r) (default)
        - ``"gaussian"``: exp(-θr²), localized influence
        - ``"linear"``: |r|
        - ``"inverse_quadratic"``: 1/sqrt(r² + θ²), smooth and bounded

        or an :class:`RBFKernel` instance.
    theta : float, optional
        Shape parameter for Gaussian and inverse quadratic kernels.
        Default is 1.0.
    regularization : float, optional
        Ridge parameter λ (0 for exact interpolation). Default is 0.

    Returns
    -------
    interpolator : Callable[[Tensor], Tensor]
        Function that evaluates the RBF at query points.

    Examples
    --------
    >>> import torch
    >>> points = torch.rand(20, 2, dtype=torch.float64) * 4
    >>> values = torch.sin(points[:, 0]) * torch.cos(points[:, 1])
    >>> f = rbf_interpolate(points, values, kernel="gaussian")
    >>> f(torch.tensor([[0.5, 0.5]], dtype=torch.float64))
    """
    from ._rbf_evaluate import rbf_evaluate
    from ._rbf_fit import rbf_fit

    rbf = rbf_fit(
        points,
        values,
        kernel=kernel,
        theta=theta,
        regularization=regularization,
    )
    return lambda q: rbf_evaluate(rbf, q)
