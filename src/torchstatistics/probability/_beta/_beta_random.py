"""Beta random variates."""

import math

import torch
from torch import Tensor

from .._piecewise import elementwise, sample_piecewise


def _valid(a: Tensor, b: Tensor) -> Tensor:
    return (a > 0) & (a < math.inf) & (b > 0) & (b < math.inf)


def _draw(a: Tensor, b: Tensor) -> Tensor:
    return torch.distributions.Beta(a, b).sample()


@elementwise
def beta_random(a, b, *size) -> Tensor:
    r"""Random variates from the beta distribution.

    Parameters
    ----------
    a : Tensor or float
        First shape parameter. Must be positive and finite.
    b : Tensor or float
        Second shape parameter. Must be positive and finite.
    *size : int or Sequence[int]
        Output shape. A single integer ``n`` gives an ``(n, n)`` tensor; a
        sequence gives that shape; several integers give those dimensions.
        Defaults to the common shape of ``a`` and ``b``.

    Returns
    -------
    Tensor
        Variates; NaN where a parameter is invalid.
    """
    return sample_piecewise(_valid, _draw, a, b, size=size, name="beta_random")
