"""Birnbaum-Saunders random variates."""

import torch
from torch import Tensor

from .._piecewise import elementwise, sample_piecewise
from ._birnbaum_saunders_parameters import from_normal, valid_parameters


def _draw(shape: Tensor, scale: Tensor, location: Tensor) -> Tensor:
    u = torch.rand(shape.shape, dtype=shape.dtype, device=shape.device)
    return from_normal(shape * torch.special.ndtri(u), scale, location)


@elementwise
def birnbaum_saunders_random(shape, scale, location, *size) -> Tensor:
    r"""Random variates from the Birnbaum-Saunders distribution.

    Each variate is the quantile of one uniform draw.

    Parameters
    ----------
    shape : Tensor or float
        Shape parameter gamma. Must be positive and finite.
    scale : Tensor or float
        Scale parameter beta. Must be positive and finite.
    location : Tensor or float
        Location parameter mu. Must be finite.
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
    >>> birnbaum_saunders_random(1.0, 1.0, 0.0, [2, 2]).shape
    torch.Size([2, 2])
    """
    return sample_piecewise(
        valid_parameters,
        _draw,
        shape,
        scale,
        location,
        size=size,
        name="birnbaum_saunders_random",
    )
