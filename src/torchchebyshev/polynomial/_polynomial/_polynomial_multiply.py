from .._convolve import convolve
from .._variable_mismatch_error import check_same_variable
from ._polynomial import Polynomial, polynomial


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients. Result degree is deg(p) + deg(q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q.

    Raises
    ------
    VariableMismatchError
        If p and q have different variables.
    """
    check_same_variable(p, q)

    return polynomial(convolve(p.coeffs, q.coeffs), p.var)
