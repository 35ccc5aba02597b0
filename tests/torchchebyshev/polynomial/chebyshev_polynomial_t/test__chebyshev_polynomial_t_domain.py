"""Tests for domain handling in ChebyshevPolynomialT."""

import warnings

import pytest
import torch

from torchchebyshev.polynomial import (
    ChebyshevPolynomialT,
    DomainError,
    PolynomialError,
    chebyshev_polynomial_t,
    chebyshev_polynomial_t_evaluate,
    chebyshev_polynomial_t_fit,
    chebyshev_polynomial_t_integral,
    chebyshev_polynomial_t_weight,
)


class TestChebyshevPolynomialTEvaluateDomain:
    """Evaluation never checks the domain."""

    def test_evaluate_outside_domain_does_not_warn(self):
        """Evaluating outside [-1, 1] is silent."""
        c = chebyshev_polynomial_t(torch.tensor([1.0, 2.0]))

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            y = chebyshev_polynomial_t_evaluate(c, torch.tensor([2.0, -3.0]))

        torch.testing.assert_close(y, torch.tensor([5.0, -5.0]))


class TestChebyshevPolynomialTIntegralDomain:
    """Definite integrals warn for bounds outside [-1, 1]."""

    def test_integral_warns_upper_outside_domain(self):
        """Upper bound above 1 warns."""
        c = chebyshev_polynomial_t(torch.tensor([1.0]))

        with pytest.warns(UserWarning, match="outside natural domain"):
            chebyshev_polynomial_t_integral(c, 0.0, 2.0)

    def test_integral_warns_lower_outside_domain(self):
        """Lower bound below -1 warns."""
        c = chebyshev_polynomial_t(torch.tensor([1.0]))

        with pytest.warns(UserWarning, match="outside natural domain"):
            chebyshev_polynomial_t_integral(c, -2.0, 0.0)

    def test_integral_warns_reversed_bounds_outside_domain(self):
        """A bound outside the domain warns whichever side it is on."""
        c = chebyshev_polynomial_t(torch.tensor([1.0]))

        with pytest.warns(UserWarning, match="outside natural domain"):
            chebyshev_polynomial_t_integral(c, 2.0, 0.0)

    def test_integral_outside_domain_still_computed(self):
        """The value is still returned."""
        c = chebyshev_polynomial_t(torch.tensor([1.0]))

        with pytest.warns(UserWarning):
            v = chebyshev_polynomial_t_integral(c, 0.0, 3.0)

        torch.testing.assert_close(v, torch.tensor(3.0))

    def test_integral_no_warning_at_boundary(self):
        """Integrating over exactly [-1, 1] is silent."""
        c = chebyshev_polynomial_t(torch.tensor([1.0]))

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            chebyshev_polynomial_t_integral(
                c, torch.tensor(-1.0), torch.tensor(1.0)
            )


class TestChebyshevPolynomialTFitDomain:
    """Fitting rejects points outside [-1, 1]."""

    def test_fit_raises_above_domain(self):
        """A point above 1 raises DomainError."""
        x = torch.tensor([0.0, 0.5, 1.5])
        y = torch.tensor([1.0, 2.0, 3.0])

        with pytest.raises(DomainError):
            chebyshev_polynomial_t_fit(x, y, degree=1)

    def test_fit_domain_error_is_polynomial_error(self):
        """DomainError is a PolynomialError."""
        x = torch.tensor([-2.0, 0.0])
        y = torch.tensor([1.0, 2.0])

        with pytest.raises(PolynomialError):
            chebyshev_polynomial_t_fit(x, y, degree=1)

    def test_fit_accepts_boundary(self):
        """Points exactly at -1 and 1 are accepted."""
        x = torch.tensor([-1.0, 0.0, 1.0])
        y = torch.tensor([1.0, 0.0, 1.0])

        chebyshev_polynomial_t_fit(x, y, degree=2)


class TestChebyshevPolynomialTWeightDomain:
    """The weight function warns outside [-1, 1]."""

    def test_weight_warns_outside_domain(self):
        """Points outside [-1, 1] warn."""
        with pytest.warns(UserWarning, match="outside natural domain"):
            w = chebyshev_polynomial_t_weight(torch.tensor([0.0, 1.5]))

        assert torch.isnan(w[1])

    def test_weight_no_warning_inside_domain(self):
        """Points inside [-1, 1] are silent."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            chebyshev_polynomial_t_weight(torch.tensor([-0.5, 0.0, 0.5]))


class TestChebyshevPolynomialTDomainConstant:
    """Tests for the DOMAIN class constant."""

    def test_domain_bounds(self):
        assert ChebyshevPolynomialT.DOMAIN[0] == -1.0
        assert ChebyshevPolynomialT.DOMAIN[1] == 1.0
