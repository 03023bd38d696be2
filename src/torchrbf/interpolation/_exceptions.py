"""Exception classes for interpolation module."""

from typing import Sequence, Tuple


class RBFError(Exception):
    """Base exception for radial basis function interpolation errors."""

    pass


class DimensionMismatchError(RBFError, ValueError):
    """Raised when points, values, or queries have incompatible shapes."""

    pass


class InterpolatorStateError(RBFError, RuntimeError):
    """Raised when an interpolator operation is called out of order."""

    pass


class NoDataError(InterpolatorStateError):
    """Raised when weights are requested before any data was set."""

    pass


class NotFittedError(InterpolatorStateError):
    """Raised when the interpolant is used before a successful fit."""

    pass


class SingularMatrixError(RBFError, RuntimeError):
    """Raised when the kernel system cannot be solved reliably."""

    def __init__(self, condition_number: float, reason: str = "singular"):
        super().__init__(
            f"Kernel matrix is {reason} (condition number = "
            f"{condition_number:.2e}). Consider: (1) enabling "
            f"regularization, (2) increasing the regularization strength, "
            f"(3) removing coincident or nearly coincident points."
        )
        self.condition_number = condition_number
        self.reason = reason


class DuplicatePointsError(SingularMatrixError):
    """Raised when coincident points make the kernel matrix singular."""

    def __init__(self, pairs: Sequence[Tuple[int, int]]):
        self.pairs = [tuple(pair) for pair in pairs]
        shown = ", ".join(str(pair) for pair in self.pairs[:5])
        if len(self.pairs) > 5:
            shown += ", ..."
        super().__init__(
            float("inf"),
            reason=f"singular: points {shown} coincide",
        )


class RBFConditioningWarning(UserWarning):
    """Warning when the kernel system is poorly conditioned."""

    pass
