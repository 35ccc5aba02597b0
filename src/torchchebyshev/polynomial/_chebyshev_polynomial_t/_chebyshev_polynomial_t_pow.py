import torch

from .._invalid_argument_error import InvalidArgumentError
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_multiply import chebyshev_polynomial_t_multiply


def chebyshev_polynomial_t_pow(
    a: ChebyshevPolynomialT,
    n: int,
) -> ChebyshevPolynomialT:
    """Integer power of a Chebyshev series.

    Walks the bits of ``n`` from least significant, squaring ``a`` once per
    bit, so only O(log n) series products are formed.

    Parameters
    ----------
    a : ChebyshevPolynomialT
        Base series.
    n : int
        Exponent, ``n >= 0``.

    Returns
    -------
    ChebyshevPolynomialT
        ``a`` multiplied by itself ``n`` times; ``T_0`` when ``n == 0``.

    Raises
    ------
    InvalidArgumentError
        If n is negative.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0, 1.0]))  # 1 + T_1
    >>> chebyshev_polynomial_t_pow(a, 2).coeffs  # 1.5 + 2*T_1 + 0.5*T_2
    tensor([1.5000, 2.0000, 0.5000])
    """
    if n < 0:
        raise InvalidArgumentError(f"Exponent must be non-negative, got {n}")

    result = chebyshev_polynomial_t(
        torch.ones(1, dtype=a.coeffs.dtype, device=a.coeffs.device),
        a.var,
    )

    square = a

    while n:
        if n & 1:
            result = chebyshev_polynomial_t_multiply(result, square)

        n >>= 1

        if n:
            square = chebyshev_polynomial_t_multiply(square, square)

    return result
