from numbers import Number
from typing import Union

from torch import Tensor

from ._polynomial import Polynomial, polynomial


def polynomial_scale(p: Polynomial, c: Union[Tensor, Number]) -> Polynomial:
    """Multiply polynomial by a scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : Tensor or Number
        Scalar multiplier (0-d tensor or Python number).

    Returns
    -------
    Polynomial
        Scaled polynomial c * p.
    """
    return polynomial(p.coeffs * c, p.var)
