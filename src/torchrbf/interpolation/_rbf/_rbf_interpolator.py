"""Stateful RBF interpolator."""

from __future__ import annotations

from typing import Optional, Union

from torch import Tensor

from .._exceptions import DimensionMismatchError, NoDataError, NotFittedError
from ._rbf import RBFInterpolant
from ._rbf_distance import as_float_tensor, validate_data
from ._rbf_evaluate import rbf_evaluate
from ._rbf_fit import rbf_fit
from ._rbf_kernels import RBFKernel, rbf_kernel

UNINITIALIZED = "uninitialized"
DATA_LOADED = "data_loaded"
FITTED = "fitted"


class RBFInterpolator:
    """Radial Basis Function interpolator bound to one kernel.

    The interpolator moves through three states:

    - ``"uninitialized"``: no data.
    - ``"data_loaded"``: :meth:`set_data` stored points and values.
    - ``"fitted"``: :meth:`calc_weights` solved for the weights;
      :meth:`calc_value` may be called any number of times.

    Setting new data always returns to ``"data_loaded"``, so values are
    never computed from weights of a previous data set.

    Parameters
    ----------
    kernel : str or RBFKernel, optional
        Kernel name or instance. Default is ``"thin_plate"``. A kernel
        instance is shared, not copied.
    theta : float, optional
        Shape parameter when ``kernel`` is a name.

    Examples
    --------
    >>> interpolator = RBFInterpolator("gaussian", theta=1.0)
    >>> interpolator.set_data([[0.0], [1.0], [2.0]], [0.0, 1.0, 0.0])
    >>> _ = interpolator.calc_weights()
    >>> interpolator.calc_value([1.0])

    Notes
    -----
    Instances are not synchronized. Distinct instances may be used from
    different threads, including instances sharing one kernel.
    """

    def __init__(
        self,
        kernel: Union[str, RBFKernel] = "thin_plate",
        theta: Optional[float] = None,
    ):
        self._kernel = rbf_kernel(kernel, theta)
        self._points: Optional[Tensor] = None
        self._values: Optional[Tensor] = None
        self._interpolant: Optional[RBFInterpolant] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kernel={self._kernel!r}, "
            f"state={self.state!r})"
        )

    @property
    def state(self) -> str:
        if self._interpolant is not None:
            return FITTED
        if self._points is not None:
            return DATA_LOADED
        return UNINITIALIZED

    @property
    def kernel(self) -> RBFKernel:
        return self._kernel

    @property
    def points(self) -> Optional[Tensor]:
        """Stored points, shape (n, dim), or None before :meth:`set_data`."""
        return self._points

    @property
    def values(self) -> Optional[Tensor]:
        """Stored values, shape (n, *value_shape), or None."""
        return self._values

    @property
    def num_points(self) -> int:
        return 0 if self._points is None else self._points.shape[0]

    @property
    def dimension(self) -> Optional[int]:
        return None if self._points is None else self._points.shape[1]

    @property
    def interpolant(self) -> Optional[RBFInterpolant]:
        """Fitted interpolant, or None when not fitted."""
        return self._interpolant

    @property
    def weights(self) -> Tensor:
        """Interpolation weights, shape (n, *value_shape)."""
        if self._interpolant is None:
            raise NotFittedError(
                "weights are not available; call calc_weights() first"
            )
        return self._interpolant.weights

    def set_data(self, points, values) -> None:
        """Replace the data set and discard any computed weights.

        Parameters
        ----------
        points : Tensor or array_like
            Data point locations, shape (n, dim), one point per row.
        values : Tensor or array_like
            Data values, shape (n,) or (n, *value_shape).

        Raises
        ------
        DimensionMismatchError
            If the number of values differs from the number of points or
            the points are not a (n, dim) matrix. The interpolator is left
            unchanged.
        """
        points, values = validate_data(points, values)

        self._points = points.clone()
        self._values = values.clone()
        self._interpolant = None

    def calc_weights(
        self,
        use_regularization: bool = False,
        regularization: float = 1e-3,
    ) -> RBFInterpolant:
        """Solve for the interpolation weights of the stored data.

        Parameters
        ----------
        use_regularization : bool
            Solve (K + λI) w = y instead of K w = y.
        regularization : float
            Ridge parameter λ, used only when ``use_regularization`` is
            true. Default is 1e-3.

        Returns
        -------
        RBFInterpolant
            The fitted interpolant.

        Raises
        ------
        NoDataError
            If no data has been set.
        SingularMatrixError
            If the system is singular or too ill-conditioned. The
            interpolator stays in the ``"data_loaded"`` state.
        """
        if self._points is None:
            raise NoDataError("no data; call set_data() first")

        self._interpolant = None

        self._interpolant = rbf_fit(
            self._points,
            self._values,
            kernel=self._kernel,
            regularization=regularization if use_regularization else 0.0,
        )

        return self._interpolant

    def calc_value(self, x) -> Tensor:
        """Evaluate the fitted function.

        Parameters
        ----------
        x : Tensor or array_like
            A single point, shape (dim,), or a batch of points,
            shape (m, dim). For 1D data a scalar is a single point.

        Returns
        -------
        Tensor
            Values of shape ``value_shape`` for a single point (a 0-d
            tensor for scalar data), or (m, *value_shape) for a batch.

        Raises
        ------
        NotFittedError
            If weights have not been computed for the current data.
        DimensionMismatchError
            If the point dimension differs from the data dimension.
        """
        if self._interpolant is None:
            raise NotFittedError(
                "interpolator is not fitted; call calc_weights() first"
            )

        dim = self._points.shape[1]
        x = as_float_tensor(
            x, dtype=self._points.dtype, device=self._points.device
        )

        if x.dim() == 0 and dim == 1:
            x = x.reshape(1)

        if x.dim() == 1:
            if x.shape[0] != dim:
                raise DimensionMismatchError(
                    f"point must have {dim} coordinates, got {x.shape[0]}"
                )
            return rbf_evaluate(self._interpolant, x.unsqueeze(0))[0]

        return rbf_evaluate(self._interpolant, x)
