from typing import Optional

import torch

from .._coefficients import DEFAULT_VARIABLE
from ._polynomial import Polynomial, polynomial


def polynomial_variable(
    var: str = DEFAULT_VARIABLE,
    dtype: Optional[torch.dtype] = None,
    device: torch.device | str = "cpu",
) -> Polynomial:
    """Return the formal variable ``x`` as a power-basis polynomial.

    Examples
    --------
    >>> polynomial_variable().coeffs
    tensor([0., 1.])
    """
    return polynomial(
        torch.tensor([0.0, 1.0], dtype=dtype, device=device), var
    )
