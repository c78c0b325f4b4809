"""Standard normal random variates."""

import torch
from torch import Tensor

from .._piecewise import broadcast_parameters, elementwise


@elementwise
def standard_normal_random(*size) -> Tensor:
    r"""Random variates from the standard normal distribution.

    Parameters
    ----------
    *size : int or Sequence[int]
        Output shape. A single integer ``n`` gives an ``(n, n)`` tensor; a
        sequence gives that shape; several integers give those dimensions.
        Without arguments a single 0-d variate is drawn.

    Returns
    -------
    Tensor
        ``float64`` variates.
    """
    broadcast = broadcast_parameters(size=size, name="standard_normal_random")
    return torch.randn(broadcast.shape, dtype=broadcast.dtype)
