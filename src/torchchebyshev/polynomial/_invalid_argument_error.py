from ._polynomial_error import PolynomialError


class InvalidArgumentError(PolynomialError, ValueError):
    """Invalid argument to a polynomial operation.

    Raised for negative derivative, antiderivative or power orders and
    for negative Vandermonde degrees.
    """

    pass
