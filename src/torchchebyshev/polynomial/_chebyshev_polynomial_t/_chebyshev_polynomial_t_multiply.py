from .._convolve import convolve
from .._variable_mismatch_error import check_same_variable
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_truncate import chebyshev_polynomial_t_truncate
from ._chebyshev_polynomial_t_zseries import (
    chebyshev_polynomial_t_to_zseries,
    zseries_to_chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_multiply(
    a: ChebyshevPolynomialT,
    b: ChebyshevPolynomialT,
) -> ChebyshevPolynomialT:
    """Multiply two Chebyshev series.

    Parameters
    ----------
    a : ChebyshevPolynomialT
        First series with coefficients a_0, a_1, ..., a_m.
    b : ChebyshevPolynomialT
        Second series with coefficients b_0, b_1, ..., b_n.

    Returns
    -------
    ChebyshevPolynomialT
        Product series with degree at most m + n. Coefficients below the
        machine epsilon relative to the largest one are zeroed.

    Raises
    ------
    VariableMismatchError
        If a and b have different variables.

    Notes
    -----
    Both series are mapped to z-series, where the product is a plain
    convolution, and the result is mapped back. This is equivalent to
    the linearization formula

        T_m(x) * T_n(x) = 0.5 * (T_{m+n}(x) + T_{|m-n|}(x))

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([0.0, 1.0]))  # T_1
    >>> b = chebyshev_polynomial_t(torch.tensor([0.0, 1.0]))  # T_1
    >>> chebyshev_polynomial_t_multiply(a, b).coeffs  # 0.5*(T_0 + T_2)
    tensor([0.5000, 0.0000, 0.5000])
    """
    check_same_variable(a, b)

    z1 = chebyshev_polynomial_t_to_zseries(a.coeffs)
    z2 = chebyshev_polynomial_t_to_zseries(b.coeffs)

    product = zseries_to_chebyshev_polynomial_t(convolve(z1, z2))

    return chebyshev_polynomial_t_truncate(
        chebyshev_polynomial_t(product, a.var)
    )
