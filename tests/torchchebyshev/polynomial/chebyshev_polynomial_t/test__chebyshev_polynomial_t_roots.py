"""Tests for ChebyshevPolynomialT root finding."""

import numpy as np
import pytest
import torch
from numpy.polynomial import chebyshev as np_cheb

from torchchebyshev.polynomial import (
    DegreeError,
    InvalidArgumentError,
    chebyshev_polynomial_t,
    chebyshev_polynomial_t_companion,
    chebyshev_polynomial_t_evaluate,
    chebyshev_polynomial_t_from_roots,
    chebyshev_polynomial_t_roots,
)


class TestChebyshevPolynomialTCompanion:
    """Tests for chebyshev_polynomial_t_companion."""

    def test_companion_degree_one(self):
        """Degree 1 gives the 1x1 matrix [[-c_0/c_1]]."""
        c = chebyshev_polynomial_t(torch.tensor([2.0, 4.0]))
        A = chebyshev_polynomial_t_companion(c)
        torch.testing.assert_close(A, torch.tensor([[-0.5]]))

    def test_companion_t2(self):
        """Companion matrix for T_2."""
        c = chebyshev_polynomial_t(
            torch.tensor([0.0, 0.0, 1.0], dtype=torch.float64)
        )
        A = chebyshev_polynomial_t_companion(c)
        s = np.sqrt(0.5)
        torch.testing.assert_close(
            A, torch.tensor([[0.0, s], [s, 0.0]], dtype=torch.float64)
        )

    def test_companion_shape(self):
        """Companion matrix is degree x degree."""
        c = chebyshev_polynomial_t(torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0]))
        A = chebyshev_polynomial_t_companion(c)
        assert A.shape == (4, 4)

    def test_companion_constant_raises(self):
        """Degree 0 has no companion matrix."""
        c = chebyshev_polynomial_t(torch.tensor([3.0]))
        with pytest.raises(DegreeError, match="degree >= 1"):
            chebyshev_polynomial_t_companion(c)

    def test_companion_degree_error_is_invalid_argument(self):
        """DegreeError is an InvalidArgumentError."""
        c = chebyshev_polynomial_t(torch.tensor([3.0]))
        with pytest.raises(InvalidArgumentError):
            chebyshev_polynomial_t_companion(c)

    def test_companion_eigenvalues_are_roots(self):
        """Eigenvalues of companion matrix are roots."""
        # T_3 = 4x^3 - 3x, roots at 0, +/-sqrt(3)/2
        c = chebyshev_polynomial_t(
            torch.tensor([0.0, 0.0, 0.0, 1.0], dtype=torch.float64)
        )
        A = chebyshev_polynomial_t_companion(c)
        eigenvalues = torch.linalg.eigvalsh(A)

        expected_roots = torch.tensor(
            [-np.sqrt(3) / 2, 0.0, np.sqrt(3) / 2], dtype=torch.float64
        )

        torch.testing.assert_close(
            eigenvalues.sort().values, expected_roots, atol=1e-10, rtol=1e-10
        )

    def test_companion_is_scaled_by_leading_coefficient(self):
        """Scaling the series does not change the companion matrix."""
        coeffs = torch.tensor([1.0, -2.0, 0.5, 3.0], dtype=torch.float64)
        A = chebyshev_polynomial_t_companion(chebyshev_polynomial_t(coeffs))
        B = chebyshev_polynomial_t_companion(
            chebyshev_polynomial_t(5.0 * coeffs)
        )
        torch.testing.assert_close(A, B)

    @pytest.mark.parametrize(
        "coeffs",
        [
            [0.0, 0.0, 0.0, 0.0, 1.0],
            [1.0, 2.0, 3.0],
            [1.0, -2.0, 0.5, 3.0, -1.0, 2.0],
        ],
    )
    def test_companion_vs_numpy(self, coeffs):
        """Compare with numpy.polynomial.chebyshev.chebcompanion."""
        c = chebyshev_polynomial_t(torch.tensor(coeffs, dtype=torch.float64))
        A_torch = chebyshev_polynomial_t_companion(c)

        A_np = np_cheb.chebcompanion(coeffs)

        np.testing.assert_allclose(A_torch.numpy(), A_np, atol=1e-12)


class TestChebyshevPolynomialTRoots:
    """Tests for chebyshev_polynomial_t_roots."""

    def test_roots_linear(self):
        """Root of 1 + 2*T_1 is -1/2."""
        c = chebyshev_polynomial_t(
            torch.tensor([1.0, 2.0], dtype=torch.float64)
        )
        roots = chebyshev_polynomial_t_roots(c)
        torch.testing.assert_close(
            roots.real, torch.tensor([-0.5], dtype=torch.float64)
        )

    def test_roots_t2(self):
        """Roots of T_2."""
        # T_2 = 2x^2 - 1, roots at +/-sqrt(2)/2
        c = chebyshev_polynomial_t(
            torch.tensor([0.0, 0.0, 1.0], dtype=torch.float64)
        )
        roots = chebyshev_polynomial_t_roots(c)

        expected = torch.tensor(
            [-np.sqrt(2) / 2, np.sqrt(2) / 2], dtype=torch.float64
        )

        torch.testing.assert_close(
            roots.real.sort().values, expected, atol=1e-10, rtol=1e-10
        )

    def test_roots_are_complex(self):
        """Roots are returned as a complex tensor."""
        c = chebyshev_polynomial_t(torch.tensor([0.0, 0.0, 1.0]))
        assert chebyshev_polynomial_t_roots(c).is_complex()

    def test_roots_complex_pair(self):
        """x^2 + 1 = 1.5*T_0 + 0.5*T_2 has roots +/-i."""
        c = chebyshev_polynomial_t(
            torch.tensor([1.5, 0.0, 0.5], dtype=torch.float64)
        )
        roots = chebyshev_polynomial_t_roots(c)
        torch.testing.assert_close(
            roots.imag.sort().values,
            torch.tensor([-1.0, 1.0], dtype=torch.float64),
        )
        torch.testing.assert_close(
            roots.real, torch.zeros(2, dtype=torch.float64), atol=1e-12, rtol=0
        )

    @pytest.mark.parametrize("n", [2, 3, 5, 8])
    def test_roots_of_tn_are_chebyshev_nodes(self, n):
        """Roots of T_n are cos((2k+1)*pi/(2n))."""
        coeffs = torch.zeros(n + 1, dtype=torch.float64)
        coeffs[n] = 1.0
        roots = chebyshev_polynomial_t_roots(chebyshev_polynomial_t(coeffs))

        k = torch.arange(n, dtype=torch.float64)
        expected = torch.cos((2 * k + 1) * torch.pi / (2 * n))

        torch.testing.assert_close(
            roots.real.sort().values,
            expected.sort().values,
            atol=1e-10,
            rtol=1e-10,
        )

    def test_roots_evaluate_to_zero(self):
        """The series vanishes at its roots."""
        c = chebyshev_polynomial_t(
            torch.tensor([1.0, -2.0, 0.5, 3.0, -1.0], dtype=torch.float64)
        )
        roots = chebyshev_polynomial_t_roots(c)
        values = chebyshev_polynomial_t_evaluate(c, roots)
        torch.testing.assert_close(
            values, torch.zeros_like(values), atol=1e-10, rtol=0
        )

    def test_roots_vs_numpy(self):
        """Compare with numpy.polynomial.chebyshev.chebroots."""
        coeffs = [1.0, 2.0, 3.0, 4.0, 5.0]

        c = chebyshev_polynomial_t(torch.tensor(coeffs, dtype=torch.float64))
        roots = chebyshev_polynomial_t_roots(c).numpy()

        roots_np = np_cheb.chebroots(coeffs).astype(complex)

        np.testing.assert_allclose(
            np.sort_complex(roots), np.sort_complex(roots_np), atol=1e-10
        )

    def test_roots_constant_raises(self):
        """A constant series has no roots to extract."""
        c = chebyshev_polynomial_t(torch.tensor([1.0]))
        with pytest.raises(DegreeError):
            chebyshev_polynomial_t_roots(c)


class TestChebyshevPolynomialTFromRoots:
    """Tests for chebyshev_polynomial_t_from_roots."""

    def test_from_roots_empty(self):
        """No roots gives the constant 1."""
        c = chebyshev_polynomial_t_from_roots(torch.tensor([]))
        torch.testing.assert_close(c.coeffs, torch.tensor([1.0]))

    def test_from_roots_single(self):
        """One root r gives -r*T_0 + T_1."""
        c = chebyshev_polynomial_t_from_roots(torch.tensor([0.5]))
        torch.testing.assert_close(c.coeffs, torch.tensor([-0.5, 1.0]))

    def test_from_roots_pair(self):
        """(x - 1/2)(x + 1/2) = T_0/4 + T_2/2."""
        c = chebyshev_polynomial_t_from_roots(torch.tensor([0.5, -0.5]))
        torch.testing.assert_close(c.coeffs, torch.tensor([0.25, 0.0, 0.5]))

    def test_from_roots_integer_promoted(self):
        """Integer roots are promoted to the default dtype."""
        c = chebyshev_polynomial_t_from_roots(torch.tensor([1, 2]))
        assert c.coeffs.dtype == torch.get_default_dtype()

    def test_from_roots_python_list(self):
        """A Python list of roots is accepted."""
        c = chebyshev_polynomial_t_from_roots([0.5])
        torch.testing.assert_close(c.coeffs, torch.tensor([-0.5, 1.0]))

    def test_from_roots_variable(self):
        """The variable label is applied."""
        c = chebyshev_polynomial_t_from_roots(torch.tensor([0.5]), var="t")
        assert c.var == "t"

    def test_from_roots_complex(self):
        """(x - i)(x + i) = x^2 + 1."""
        c = chebyshev_polynomial_t_from_roots(
            torch.tensor([1.0j, -1.0j], dtype=torch.complex128)
        )
        torch.testing.assert_close(
            c.coeffs,
            torch.tensor([1.5, 0.0, 0.5], dtype=torch.complex128),
        )

    def test_from_roots_vanishes_at_roots(self):
        """The constructed series is zero at every root."""
        roots = torch.tensor(
            [-0.9, -0.3, 0.1, 0.4, 0.8], dtype=torch.float64
        )
        c = chebyshev_polynomial_t_from_roots(roots)
        values = chebyshev_polynomial_t_evaluate(c, roots)
        torch.testing.assert_close(
            values, torch.zeros_like(values), atol=1e-12, rtol=0
        )

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 8])
    def test_from_roots_vs_numpy(self, n):
        """Compare with numpy.polynomial.chebyshev.chebfromroots."""
        roots = np.linspace(-0.9, 0.8, n)

        c = chebyshev_polynomial_t_from_roots(
            torch.tensor(roots, dtype=torch.float64)
        )

        c_np = np_cheb.chebfromroots(roots)

        np.testing.assert_allclose(
            c.coeffs.numpy(), c_np[: c.coeffs.shape[0]], atol=1e-12
        )

    def test_from_roots_round_trip(self):
        """roots(from_roots(r)) recovers r."""
        roots = torch.tensor([-0.75, -0.25, 0.3, 0.6], dtype=torch.float64)
        recovered = chebyshev_polynomial_t_roots(
            chebyshev_polynomial_t_from_roots(roots)
        )
        torch.testing.assert_close(
            recovered.real.sort().values, roots, atol=1e-10, rtol=1e-10
        )
