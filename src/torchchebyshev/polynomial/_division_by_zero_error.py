from ._polynomial_error import PolynomialError


class DivisionByZeroError(PolynomialError, ZeroDivisionError):
    """Division by the zero polynomial."""

    pass
