from numbers import Number

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._coefficients import (
    DEFAULT_VARIABLE,
    as_coefficients,
    trim_trailing_zeros,
)


@tensorclass(shadow=True)
class ChebyshevPolynomialT:
    """Chebyshev series of the first kind.

    Represents f(x) = sum_{k=0}^{n} coeffs[k] * T_k(x)

    where T_k(x) are Chebyshev polynomials of the first kind.

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[k] is the coefficient of T_k(x). Never empty; the last
        coefficient is nonzero unless N == 1.
    var : str
        Name of the indeterminate. Only used to check that operands are
        compatible.

    Notes
    -----
    The standard domain for Chebyshev polynomials is [-1, 1]. Evaluation
    outside the domain is well defined but loses the boundedness that
    motivates the basis.
    """

    coeffs: Tensor
    var: str = DEFAULT_VARIABLE

    DOMAIN = (-1.0, 1.0)

    def __call__(self, x) -> Tensor:
        from ._chebyshev_polynomial_t_evaluate import (
            chebyshev_polynomial_t_evaluate,
        )

        return chebyshev_polynomial_t_evaluate(self, x)

    def __add__(self, other) -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_add import chebyshev_polynomial_t_add

        return chebyshev_polynomial_t_add(self, other)

    def __radd__(self, other) -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_add import chebyshev_polynomial_t_add

        return chebyshev_polynomial_t_add(self, other)

    def __sub__(self, other) -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_subtract import (
            chebyshev_polynomial_t_subtract,
        )

        return chebyshev_polynomial_t_subtract(self, other)

    def __rsub__(self, other) -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_negate import (
            chebyshev_polynomial_t_negate,
        )
        from ._chebyshev_polynomial_t_subtract import (
            chebyshev_polynomial_t_subtract,
        )

        return chebyshev_polynomial_t_negate(
            chebyshev_polynomial_t_subtract(self, other)
        )

    def __neg__(self) -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_negate import (
            chebyshev_polynomial_t_negate,
        )

        return chebyshev_polynomial_t_negate(self)

    def __mul__(self, other):
        if isinstance(other, ChebyshevPolynomialT):
            from ._chebyshev_polynomial_t_multiply import (
                chebyshev_polynomial_t_multiply,
            )

            return chebyshev_polynomial_t_multiply(self, other)
        if isinstance(other, (Tensor, Number)):
            from ._chebyshev_polynomial_t_scale import (
                chebyshev_polynomial_t_scale,
            )

            return chebyshev_polynomial_t_scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, ChebyshevPolynomialT):
            from ._chebyshev_polynomial_t_multiply import (
                chebyshev_polynomial_t_multiply,
            )

            return chebyshev_polynomial_t_multiply(other, self)
        if isinstance(other, (Tensor, Number)):
            from ._chebyshev_polynomial_t_scale import (
                chebyshev_polynomial_t_scale,
            )

            return chebyshev_polynomial_t_scale(self, other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (Tensor, Number)):
            from ._chebyshev_polynomial_t_scale import (
                chebyshev_polynomial_t_scale,
            )

            return chebyshev_polynomial_t_scale(self, 1.0 / other)
        return NotImplemented

    def __pow__(self, n: int) -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_pow import chebyshev_polynomial_t_pow

        return chebyshev_polynomial_t_pow(self, n)

    def __floordiv__(
        self, other: "ChebyshevPolynomialT"
    ) -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_div import chebyshev_polynomial_t_div

        return chebyshev_polynomial_t_div(self, other)

    def __mod__(self, other: "ChebyshevPolynomialT") -> "ChebyshevPolynomialT":
        from ._chebyshev_polynomial_t_mod import chebyshev_polynomial_t_mod

        return chebyshev_polynomial_t_mod(self, other)

    def __divmod__(self, other: "ChebyshevPolynomialT"):
        from ._chebyshev_polynomial_t_divmod import (
            chebyshev_polynomial_t_divmod,
        )

        return chebyshev_polynomial_t_divmod(self, other)


def chebyshev_polynomial_t(
    coeffs,
    var: str = DEFAULT_VARIABLE,
) -> ChebyshevPolynomialT:
    """Create Chebyshev series from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence
        Coefficients in ascending order, shape (N,).
        coeffs[k] is the coefficient of T_k(x). An empty sequence is the
        zero series; integer inputs are promoted to the default dtype.
    var : str, optional
        Variable label. Default is ``"x"``.

    Returns
    -------
    ChebyshevPolynomialT
        Chebyshev series instance with trailing zero coefficients removed.

    Raises
    ------
    PolynomialError
        If coeffs has more than one dimension.

    Examples
    --------
    >>> c = chebyshev_polynomial_t(torch.tensor([1.0, 2.0, 3.0]))  # 1*T_0 + 2*T_1 + 3*T_2
    >>> c.coeffs
    tensor([1., 2., 3.])
    >>> chebyshev_polynomial_t([1.0, 0.0, 0.0]).coeffs
    tensor([1.])
    """
    coeffs = trim_trailing_zeros(as_coefficients(coeffs))

    return ChebyshevPolynomialT(coeffs=coeffs, var=var)


def _nan_chebyshev_polynomial_t(
    c: ChebyshevPolynomialT,
) -> ChebyshevPolynomialT:
    """Canonical single-coefficient NaN series in ``c``'s variable."""
    return chebyshev_polynomial_t(
        torch.full(
            (1,),
            float("nan"),
            dtype=c.coeffs.dtype,
            device=c.coeffs.device,
        ),
        c.var,
    )
