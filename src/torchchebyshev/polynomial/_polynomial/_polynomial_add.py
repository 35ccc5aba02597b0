from numbers import Number

import torch
from torch import Tensor

from .._variable_mismatch_error import check_same_variable
from ._polynomial import Polynomial, polynomial


def _pad_to(coeffs: Tensor, n: int) -> Tensor:
    return torch.nn.functional.pad(coeffs, [0, n - coeffs.shape[-1]])


def polynomial_add(p: Polynomial, q) -> Polynomial:
    """Add two polynomials.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees. A scalar ``q`` is added to the
    constant term.

    Parameters
    ----------
    p : Polynomial
        First summand.
    q : Polynomial, Tensor or Number
        Second summand.

    Returns
    -------
    Polynomial
        Sum p + q.

    Raises
    ------
    VariableMismatchError
        If p and q have different variables.
    """
    if isinstance(q, (Tensor, Number)):
        q = polynomial(q, p.var)

    check_same_variable(p, q)

    n = max(p.coeffs.shape[-1], q.coeffs.shape[-1])

    return polynomial(_pad_to(p.coeffs, n) + _pad_to(q.coeffs, n), p.var)
