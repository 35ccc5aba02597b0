"""Tests for the polynomial exception hierarchy."""

import pytest

from torchchebyshev.polynomial import (
    DegreeError,
    DivisionByZeroError,
    DomainError,
    InvalidArgumentError,
    PolynomialError,
    VariableMismatchError,
)


class TestExceptionHierarchy:
    """Every error is a PolynomialError and a matching builtin."""

    @pytest.mark.parametrize(
        "error",
        [
            DegreeError,
            DivisionByZeroError,
            DomainError,
            InvalidArgumentError,
            VariableMismatchError,
        ],
    )
    def test_polynomial_error_base(self, error):
        """Catching PolynomialError catches every library error."""
        assert issubclass(error, PolynomialError)

    def test_division_by_zero_is_zero_division_error(self):
        """Callers can catch the builtin ZeroDivisionError."""
        assert issubclass(DivisionByZeroError, ZeroDivisionError)

    def test_invalid_argument_is_value_error(self):
        """Callers can catch the builtin ValueError."""
        assert issubclass(InvalidArgumentError, ValueError)

    def test_degree_error_is_invalid_argument(self):
        """DegreeError narrows InvalidArgumentError."""
        assert issubclass(DegreeError, InvalidArgumentError)
        assert issubclass(DegreeError, ValueError)

    def test_message(self):
        """The message is kept."""
        with pytest.raises(DomainError, match="outside"):
            raise DomainError("outside [-1, 1]")
