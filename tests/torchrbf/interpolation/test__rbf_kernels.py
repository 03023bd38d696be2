"""Tests for RBF kernels."""

import dataclasses
import math

import hypothesis
import pytest
import torch

from torchrbf.interpolation import (
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
from torchrbf.testing.strategies import distances, shape_parameters

ALL_KERNELS = [
    GaussianKernel(),
    ThinPlateSplineKernel(),
    LinearKernel(),
    InverseQuadraticKernel(),
]


class TestGaussianKernel:
    """Tests for the Gaussian kernel."""

    def test_values(self):
        """Should evaluate exp(-θr²)."""
        kernel = GaussianKernel(theta=2.0)
        r = torch.tensor([0.0, 0.5, 1.0, 3.0], dtype=torch.float64)

        torch.testing.assert_close(kernel(r), torch.exp(-2.0 * r**2))

    def test_one_at_zero(self):
        """Should be 1 at r = 0."""
        assert GaussianKernel(theta=5.0)(0.0).item() == 1.0

    def test_default_theta(self):
        assert GaussianKernel().theta == 1.0

    @pytest.mark.parametrize("theta", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_theta(self, theta):
        with pytest.raises(ValueError, match="theta"):
            GaussianKernel(theta=theta)


class TestThinPlateSplineKernel:
    """Tests for the thin plate spline kernel."""

    def test_zero_distance_is_exactly_zero(self):
        """Should return 0.0 at r = 0, never NaN."""
        value = ThinPlateSplineKernel()(0.0)

        assert not torch.isnan(value)
        assert value.item() == 0.0

    def test_zero_inside_tensor(self):
        """Should zero only the r = 0 entries."""
        r = torch.tensor([0.0, 0.5, 2.0, 0.0], dtype=torch.float64)

        result = ThinPlateSplineKernel()(r)

        expected = torch.tensor(
            [0.0, 0.25 * math.log(0.5), 4.0 * math.log(2.0), 0.0],
            dtype=torch.float64,
        )
        torch.testing.assert_close(result, expected)

    def test_zero_at_unit_distance(self):
        assert ThinPlateSplineKernel()(1.0).item() == 0.0

    def test_nan_input_is_not_masked(self):
        """NaN distances should propagate, not be replaced by 0."""
        r = torch.tensor([float("nan"), 0.0], dtype=torch.float64)

        result = ThinPlateSplineKernel()(r)

        assert torch.isnan(result[0])
        assert result[1].item() == 0.0

    def test_gradient_at_zero(self):
        """d/dr r² log(r) -> 0 as r -> 0; the backward pass must not be NaN."""
        r = torch.tensor([0.0, 2.0], dtype=torch.float64, requires_grad=True)

        ThinPlateSplineKernel()(r).sum().backward()

        torch.testing.assert_close(
            r.grad,
            torch.tensor(
                [0.0, 2.0 * (2.0 * math.log(2.0) + 1.0)], dtype=torch.float64
            ),
        )

    def test_float32(self):
        r = torch.tensor([0.0, 2.0], dtype=torch.float32)

        result = ThinPlateSplineKernel()(r)

        assert result.dtype == torch.float32
        assert result[0].item() == 0.0


class TestLinearKernel:
    """Tests for the linear kernel."""

    def test_values(self):
        r = torch.tensor([0.0, 1.5, 4.0], dtype=torch.float64)

        torch.testing.assert_close(LinearKernel()(r), r)

    def test_theta_is_none(self):
        assert LinearKernel().theta is None


class TestInverseQuadraticKernel:
    """Tests for the inverse quadratic kernel."""

    def test_values(self):
        """Should evaluate 1/sqrt(r² + θ²)."""
        kernel = InverseQuadraticKernel(theta=0.5)
        r = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)

        expected = 1 / torch.sqrt(r**2 + 0.25)
        torch.testing.assert_close(kernel(r), expected)

    def test_value_at_zero(self):
        """Should be 1/θ at r = 0."""
        assert InverseQuadraticKernel(theta=4.0)(0.0).item() == 0.25

    def test_decays(self):
        kernel = InverseQuadraticKernel()
        r = torch.linspace(0, 10, 20, dtype=torch.float64)

        values = kernel(r)

        assert (values[1:] < values[:-1]).all()

    def test_invalid_theta(self):
        with pytest.raises(ValueError, match="theta"):
            InverseQuadraticKernel(theta=0.0)


class TestKernelContract:
    """Tests shared by all kernels."""

    @pytest.mark.parametrize("kernel", ALL_KERNELS, ids=lambda k: k.name)
    def test_negative_distance_rejected(self, kernel):
        """Should reject negative distances."""
        with pytest.raises(ValueError, match="non-negative"):
            kernel(torch.tensor([0.0, -1e-12], dtype=torch.float64))

    @pytest.mark.parametrize("kernel", ALL_KERNELS, ids=lambda k: k.name)
    def test_is_rbf_kernel(self, kernel):
        """Every variant should be usable through the base interface."""
        assert isinstance(kernel, RBFKernel)
        assert KERNELS[kernel.name] is type(kernel)

    @pytest.mark.parametrize("kernel", ALL_KERNELS, ids=lambda k: k.name)
    def test_preserves_shape(self, kernel):
        r = torch.rand(3, 4, dtype=torch.float64)

        assert kernel(r).shape == (3, 4)

    @pytest.mark.parametrize("kernel", ALL_KERNELS, ids=lambda k: k.name)
    def test_integer_input(self, kernel):
        """Integer distances should be evaluated in float64."""
        result = kernel(torch.tensor([0, 1, 2]))

        assert result.dtype == torch.float64

    @pytest.mark.parametrize("kernel", ALL_KERNELS, ids=lambda k: k.name)
    def test_immutable(self, kernel):
        with pytest.raises(dataclasses.FrozenInstanceError):
            kernel.theta = 3.0

    def test_equal_parameters_compare_equal(self):
        assert GaussianKernel(theta=2.0) == GaussianKernel(theta=2.0)
        assert GaussianKernel(theta=2.0) != GaussianKernel(theta=3.0)
        assert hash(LinearKernel()) == hash(LinearKernel())

    def test_positive_definite_registry(self):
        assert POSITIVE_DEFINITE == {"gaussian", "inverse_quadratic"}
        assert KERNELS_WITH_THETA == {"gaussian", "inverse_quadratic"}

    @hypothesis.settings(deadline=None, max_examples=50)
    @hypothesis.given(r=distances(), theta=shape_parameters())
    def test_finite_on_valid_distances(self, r, theta):
        """Kernels should never produce NaN for valid distances."""
        for kernel in [
            GaussianKernel(theta=theta),
            ThinPlateSplineKernel(),
            LinearKernel(),
            InverseQuadraticKernel(theta=theta),
        ]:
            assert not torch.isnan(kernel(r)).any()

    @hypothesis.settings(deadline=None, max_examples=50)
    @hypothesis.given(r=distances(), theta=shape_parameters())
    def test_deterministic(self, r, theta):
        kernel = GaussianKernel(theta=theta)

        assert torch.equal(kernel(r), kernel(r.clone()))


class TestRBFKernelFactory:
    """Tests for rbf_kernel."""

    @pytest.mark.parametrize("name", sorted(KERNELS))
    def test_by_name(self, name):
        kernel = rbf_kernel(name)

        assert isinstance(kernel, KERNELS[name])

    def test_default_is_thin_plate(self):
        assert isinstance(rbf_kernel(), ThinPlateSplineKernel)

    def test_theta(self):
        assert rbf_kernel("gaussian", theta=3.0) == GaussianKernel(theta=3.0)

    def test_instance_passthrough(self):
        kernel = InverseQuadraticKernel(theta=2.0)

        assert rbf_kernel(kernel) is kernel

    def test_instance_with_theta(self):
        with pytest.raises(ValueError, match="theta"):
            rbf_kernel(GaussianKernel(), theta=2.0)

    def test_theta_for_kernel_without_theta(self):
        with pytest.raises(ValueError, match="theta"):
            rbf_kernel("linear", theta=2.0)

    def test_unknown_kernel(self):
        with pytest.raises(ValueError, match="Unknown kernel"):
            rbf_kernel("cubic")
