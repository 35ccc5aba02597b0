from numbers import Number
from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._coefficients import (
    DEFAULT_VARIABLE,
    as_coefficients,
    trim_trailing_zeros,
)


@tensorclass(shadow=True)
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i.
    var : str
        Name of the indeterminate. Only used to check that operands are
        compatible.

    Examples
    --------
    Polynomial 1 + 2x + 3x^2:
        polynomial(torch.tensor([1.0, 2.0, 3.0]))

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p * 2.0  # polynomial_scale(p, 2.0)
        -p       # polynomial_negate(p)
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor
    var: str = DEFAULT_VARIABLE

    def __add__(self, other) -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __radd__(self, other) -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __sub__(self, other) -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def __rsub__(self, other) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_negate(polynomial_subtract(self, other))

    def __mul__(self, other: Union["Polynomial", Tensor, Number]):
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)
        if isinstance(other, (Tensor, Number)):
            return polynomial_scale(self, other)
        return NotImplemented

    def __rmul__(self, other: Union["Polynomial", Tensor, Number]):
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(other, self)
        if isinstance(other, (Tensor, Number)):
            return polynomial_scale(self, other)
        return NotImplemented

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __call__(self, x) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs, var: str = DEFAULT_VARIABLE) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence
        Coefficients in ascending order, shape (N,). An empty sequence is
        the zero polynomial.
    var : str, optional
        Variable label. Default is ``"x"``.

    Returns
    -------
    Polynomial
        Polynomial instance with trailing zero coefficients removed.

    Raises
    ------
    PolynomialError
        If coeffs has more than one dimension.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0, 0.0]))  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    coeffs = trim_trailing_zeros(as_coefficients(coeffs))

    return Polynomial(coeffs=coeffs, var=var)
