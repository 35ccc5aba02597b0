import torch
from torch import Tensor

from ._polynomial_error import PolynomialError

DEFAULT_VARIABLE = "x"


def as_coefficients(coeffs) -> Tensor:
    """Coerce ``coeffs`` to a 1-D floating or complex coefficient tensor.

    Empty input becomes ``[0]``, 0-d input becomes length 1, and integer or
    boolean tensors are promoted to ``torch.get_default_dtype()``.
    """
    coeffs = torch.as_tensor(coeffs)

    if not (coeffs.is_floating_point() or coeffs.is_complex()):
        coeffs = coeffs.to(torch.get_default_dtype())

    if coeffs.dim() == 0:
        return coeffs.reshape(1)

    if coeffs.dim() > 1:
        raise PolynomialError(
            f"Coefficients must be one-dimensional, got shape "
            f"{tuple(coeffs.shape)}"
        )

    if coeffs.shape[-1] == 0:
        return torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device)

    return coeffs


def trim_trailing_zeros(coeffs: Tensor) -> Tensor:
    """Drop trailing exact zeros, keeping at least one coefficient."""
    # NaN compares unequal to zero, so NaN coefficients are kept
    nonzero = torch.nonzero(coeffs != 0)

    if nonzero.numel() == 0:
        return coeffs[:1]

    return coeffs[: int(nonzero[-1, 0]) + 1]


def as_points(x, like: Tensor) -> Tensor:
    """Coerce evaluation points to a tensor on ``like``'s device.

    Tensors pass through unchanged. Python numbers and sequences take
    ``like``'s dtype (or its complex counterpart for complex values) so
    they are not rounded through the default dtype first.
    """
    if isinstance(x, Tensor):
        return x

    if torch.as_tensor(x).is_complex():
        dtype = torch.promote_types(like.dtype, torch.complex64)
    else:
        dtype = like.dtype

    return torch.as_tensor(x, dtype=dtype, device=like.device)
