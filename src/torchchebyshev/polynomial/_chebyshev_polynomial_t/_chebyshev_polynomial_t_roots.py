import torch
from torch import Tensor

from ._chebyshev_polynomial_t import ChebyshevPolynomialT
from ._chebyshev_polynomial_t_companion import chebyshev_polynomial_t_companion


def chebyshev_polynomial_t_roots(c: ChebyshevPolynomialT) -> Tensor:
    """Zeros of a Chebyshev series.

    The eigenvalues of the scaled companion matrix, returned as a complex
    tensor of length ``degree`` in no particular order. Repeated roots are
    reported with their multiplicity, to the accuracy the eigensolver gives.

    Raises
    ------
    DegreeError
        If the series is a constant.

    Examples
    --------
    >>> c = chebyshev_polynomial_t(torch.tensor([0.0, 0.0, 1.0]))  # T_2
    >>> chebyshev_polynomial_t_roots(c).real.sort().values
    tensor([-0.7071,  0.7071])
    """
    return torch.linalg.eigvals(chebyshev_polynomial_t_companion(c))
