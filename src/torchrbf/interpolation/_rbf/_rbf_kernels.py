"""RBF kernel functions."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

import torch
from torch import Tensor


class RBFKernel(ABC):
    """Radially symmetric kernel φ(r) of a non-negative distance r.

    Kernels are immutable and pure, so one instance may be shared by any
    number of interpolators.

    Attributes
    ----------
    name : str
        Registry name of the kernel.
    positive_definite : bool
        Whether the kernel matrix of distinct points is positive definite.
    """

    name: ClassVar[str]
    positive_definite: ClassVar[bool] = False

    def __call__(self, r: Union[Tensor, float]) -> Tensor:
        """Evaluate the kernel at distances ``r``.

        Parameters
        ----------
        r : Tensor or float
            Distances, shape (*). Python scalars are evaluated in float64.

        Returns
        -------
        Tensor
            Kernel values, same shape as r.

        Raises
        ------
        ValueError
            If any distance is negative.
        """
        if not isinstance(r, Tensor):
            r = torch.as_tensor(r, dtype=torch.float64)
        elif not r.is_floating_point():
            r = r.to(torch.float64)

        if (r < 0).any():
            raise ValueError(
                f"{type(self).__name__} requires non-negative distances"
            )

        return self.evaluate(r)

    @abstractmethod
    def evaluate(self, r: Tensor) -> Tensor:
        """Kernel formula, without argument checking."""

    @property
    def theta(self) -> Optional[float]:
        return None


def _check_theta(kernel: RBFKernel, theta: float) -> None:
    if not (math.isfinite(theta) and theta > 0):
        raise ValueError(
            f"{type(kernel).__name__} requires a finite theta > 0, "
            f"got {theta}"
        )


@dataclass(frozen=True)
class GaussianKernel(RBFKernel):
    """Gaussian kernel: exp(-θr²).

    Parameters
    ----------
    theta : float
        Shape parameter. Larger values localize the kernel. Default is 1.0.
    """

    name: ClassVar[str] = "gaussian"
    positive_definite: ClassVar[bool] = True

    theta: float = 1.0

    def __post_init__(self):
        _check_theta(self, self.theta)

    def evaluate(self, r: Tensor) -> Tensor:
        return torch.exp(-self.theta * r**2)


@dataclass(frozen=True)
class ThinPlateSplineKernel(RBFKernel):
    """Thin plate spline kernel: r² log(r), with φ(0) = 0."""

    name: ClassVar[str] = "thin_plate"

    def evaluate(self, r: Tensor) -> Tensor:
        # 0 * log(0) is NaN; the limit r -> 0 is 0. Evaluating at r = 1
        # instead keeps the backward pass finite. NaN inputs stay NaN.
        zero = r == 0
        r_safe = torch.where(zero, torch.ones_like(r), r)
        value = r_safe**2 * torch.log(r_safe)

        return torch.where(zero, torch.zeros_like(value), value)


@dataclass(frozen=True)
class LinearKernel(RBFKernel):
    """Linear kernel: |r|."""

    name: ClassVar[str] = "linear"

    def evaluate(self, r: Tensor) -> Tensor:
        return torch.abs(r)


@dataclass(frozen=True)
class InverseQuadraticKernel(RBFKernel):
    """Inverse quadratic kernel: 1/sqrt(r² + θ²).

    Parameters
    ----------
    theta : float
        Shape parameter. Default is 1.0.
    """

    name: ClassVar[str] = "inverse_quadratic"
    positive_definite: ClassVar[bool] = True

    theta: float = 1.0

    def __post_init__(self):
        _check_theta(self, self.theta)

    def evaluate(self, r: Tensor) -> Tensor:
        return 1 / torch.sqrt(r**2 + self.theta**2)


KERNELS = {
    "gaussian": GaussianKernel,
    "thin_plate": ThinPlateSplineKernel,
    "linear": LinearKernel,
    "inverse_quadratic": InverseQuadraticKernel,
}

# Kernels that take a theta parameter
KERNELS_WITH_THETA = {
    "gaussian",
    "inverse_quadratic",
}

# Kernels whose matrix is positive definite for distinct points
POSITIVE_DEFINITE = {
    name for name, cls in KERNELS.items() if cls.positive_definite
}


def rbf_kernel(
    kernel: Union[str, RBFKernel] = "thin_plate",
    theta: Optional[float] = None,
) -> RBFKernel:
    """Resolve a kernel name or instance to a kernel instance.

    Parameters
    ----------
    kernel : str or RBFKernel
        Kernel name (one of ``KERNELS``) or a kernel instance.
    theta : float, optional
        Shape parameter for kernels that take one. Defaults to 1.0.

    Returns
    -------
    RBFKernel
        The kernel.
    """
    if isinstance(kernel, RBFKernel):
        if theta is not None:
            raise ValueError(
                "theta cannot be combined with a kernel instance; "
                "construct the kernel with its theta instead"
            )
        return kernel

    if kernel not in KERNELS:
        raise ValueError(
            f"Unknown kernel '{kernel}'. Available: {list(KERNELS.keys())}"
        )

    if kernel in KERNELS_WITH_THETA:
        if theta is None:
            return KERNELS[kernel]()
        return KERNELS[kernel](theta=float(theta))

    if theta is not None:
        raise ValueError(f"Kernel '{kernel}' does not take a theta parameter")
    return KERNELS[kernel]()
