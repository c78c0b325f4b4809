"""Nakagami random variates."""

import torch
from torch import Tensor

from .._piecewise import elementwise, sample_piecewise
from ._nakagami_parameters import valid_parameters


def _draw(m: Tensor, omega: Tensor) -> Tensor:
    return torch.sqrt(torch.distributions.Gamma(m, m / omega).sample())


@elementwise
def nakagami_random(m, omega, *size) -> Tensor:
    r"""Random variates from the Nakagami distribution.

    The square of a Nakagami variate is gamma distributed with shape ``m``
    and scale ``omega / m``.

    Parameters
    ----------
    m : Tensor or float
        Shape parameter. Must be at least 1/2.
    omega : Tensor or float
        Spread parameter. Must be positive.
    *size : int or Sequence[int]
        Output shape, see :func:`gamma_random`.

    Returns
    -------
    Tensor
        Variates; NaN where a parameter is invalid.
    """
    return sample_piecewise(
        valid_parameters, _draw, m, omega, size=size, name="nakagami_random"
    )
