from ._polynomial_error import PolynomialError


class DomainError(PolynomialError):
    """Operation outside valid domain.

    Raised when fitting points lie outside the natural domain of a
    series (e.g., Chebyshev polynomials outside [-1, 1]).
    """

    pass
