from numbers import Number

from torch import Tensor

from .._variable_mismatch_error import check_same_variable
from ._polynomial import Polynomial, polynomial
from ._polynomial_add import _pad_to


def polynomial_subtract(p: Polynomial, q) -> Polynomial:
    """Subtract two polynomials.

    Computes element-wise difference of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p : Polynomial
        Minuend.
    q : Polynomial, Tensor or Number
        Subtrahend. A scalar is subtracted from the constant term.

    Returns
    -------
    Polynomial
        Difference p - q.
    """
    if isinstance(q, (Tensor, Number)):
        q = polynomial(q, p.var)

    check_same_variable(p, q)

    n = max(p.coeffs.shape[-1], q.coeffs.shape[-1])

    return polynomial(_pad_to(p.coeffs, n) - _pad_to(q.coeffs, n), p.var)
