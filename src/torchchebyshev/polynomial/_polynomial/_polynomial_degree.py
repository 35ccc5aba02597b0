import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> Tensor:
    """Highest power of ``p`` with a nonzero coefficient, as a 0-d tensor.

    The zero polynomial reports 0.
    """
    return torch.tensor(len(p.coeffs) - 1, device=p.coeffs.device)
