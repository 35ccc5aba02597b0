import torch
from torch import Tensor

from .._invalid_argument_error import InvalidArgumentError


def chebyshev_polynomial_t_vandermonde(x, degree: int) -> Tensor:
    """Pseudo-Vandermonde matrix of the Chebyshev basis.

    Row ``i`` holds ``T_0(x[i]), T_1(x[i]), ..., T_degree(x[i])``, so that
    ``V @ c`` evaluates the series with coefficients ``c`` at every point
    and ``V`` is the design matrix of a least-squares fit.

    Parameters
    ----------
    x : Tensor or sequence
        Sample points, shape (m,). Integer input is promoted to the default
        dtype.
    degree : int
        Highest degree; the matrix has ``degree + 1`` columns.

    Returns
    -------
    Tensor
        Shape (m, degree + 1).

    Raises
    ------
    InvalidArgumentError
        If degree is negative.

    Examples
    --------
    >>> chebyshev_polynomial_t_vandermonde(torch.tensor([0.0, 0.5, 1.0]), 2)
    tensor([[ 1.0000,  0.0000, -1.0000],
            [ 1.0000,  0.5000, -0.5000],
            [ 1.0000,  1.0000,  1.0000]])
    """
    if degree < 0:
        raise InvalidArgumentError(
            f"Degree must be non-negative, got {degree}"
        )

    x = torch.as_tensor(x)

    if not (x.is_floating_point() or x.is_complex()):
        x = x.to(torch.get_default_dtype())

    # T_{k+1} = 2 x T_k - T_{k-1}, columns collected then stacked
    columns = [torch.ones_like(x), x]

    while len(columns) <= degree:
        columns.append(2 * x * columns[-1] - columns[-2])

    return torch.stack(columns[: degree + 1], dim=-1)
