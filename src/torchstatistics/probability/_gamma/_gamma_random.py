"""Gamma random variates."""

import torch
from torch import Tensor

from .._piecewise import elementwise, sample_piecewise
from ._gamma_parameters import valid_parameters


def _draw(shape: Tensor, scale: Tensor) -> Tensor:
    return torch.distributions.Gamma(shape, 1.0).sample() * scale


@elementwise
def gamma_random(shape, scale, *size) -> Tensor:
    r"""Random variates from the gamma distribution.

    Parameters
    ----------
    shape : Tensor or float
        Shape parameter k. Must be positive and finite.
    scale : Tensor or float
        Scale parameter theta. Must be positive and finite.
    *size : int or Sequence[int]
        Output shape. A single integer ``n`` gives an ``(n, n)`` tensor; a
        sequence gives that shape; several integers give those dimensions.
        Defaults to the common shape of the parameters.

    Returns
    -------
    Tensor
        Variates; NaN where a parameter is invalid.

    Examples
    --------
    >>> torch.manual_seed(0)
    >>> gamma_random(2.0, 1.0, 2, 3).shape
    torch.Size([2, 3])
    """
    return sample_piecewise(
        valid_parameters, _draw, shape, scale, size=size, name="gamma_random"
    )
