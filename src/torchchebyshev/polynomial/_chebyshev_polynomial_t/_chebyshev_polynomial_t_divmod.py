from typing import Tuple

import torch

from .._division_by_zero_error import DivisionByZeroError
from .._variable_mismatch_error import check_same_variable
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_zseries import (
    _zseries_division,
    chebyshev_polynomial_t_to_zseries,
    zseries_to_chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_divmod(
    a: ChebyshevPolynomialT,
    b: ChebyshevPolynomialT,
) -> Tuple[ChebyshevPolynomialT, ChebyshevPolynomialT]:
    """Divide two Chebyshev series with remainder.

    Returns quotient q and remainder r such that a = b*q + r and
    deg(r) < deg(b).

    Parameters
    ----------
    a : ChebyshevPolynomialT
        Dividend.
    b : ChebyshevPolynomialT
        Divisor.

    Returns
    -------
    Tuple[ChebyshevPolynomialT, ChebyshevPolynomialT]
        (quotient, remainder)

    Raises
    ------
    VariableMismatchError
        If a and b have different variables.
    DivisionByZeroError
        If b is the zero series.

    Notes
    -----
    Both series are mapped to z-series and divided there by a long
    division that works inward from both ends of the symmetric dividend.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0, 2.0, 3.0]))
    >>> b = chebyshev_polynomial_t(torch.tensor([1.0, 1.0]))
    >>> q, r = chebyshev_polynomial_t_divmod(a, b)
    >>> q.coeffs, r.coeffs
    (tensor([-4.,  6.]), tensor([2.]))
    """
    check_same_variable(a, b)

    a_coeffs = a.coeffs
    b_coeffs = b.coeffs

    dtype = torch.promote_types(a_coeffs.dtype, b_coeffs.dtype)

    a_coeffs = a_coeffs.to(dtype)
    b_coeffs = b_coeffs.to(dtype)

    n = a_coeffs.shape[-1] - 1
    m = b_coeffs.shape[-1] - 1

    zero = chebyshev_polynomial_t(
        torch.zeros(1, dtype=dtype, device=a_coeffs.device), a.var
    )

    if n < m:
        return zero, chebyshev_polynomial_t(a_coeffs, a.var)

    if m == 0:
        if b_coeffs[0] == 0:
            raise DivisionByZeroError(
                "Cannot divide by the zero Chebyshev series"
            )

        return chebyshev_polynomial_t(a_coeffs / b_coeffs[0], a.var), zero

    quo, rem = _zseries_division(
        chebyshev_polynomial_t_to_zseries(a_coeffs),
        chebyshev_polynomial_t_to_zseries(b_coeffs),
    )

    q = chebyshev_polynomial_t(zseries_to_chebyshev_polynomial_t(quo), a.var)
    r = chebyshev_polynomial_t(zseries_to_chebyshev_polynomial_t(rem), a.var)

    return q, r
