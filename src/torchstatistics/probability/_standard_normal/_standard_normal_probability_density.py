"""Standard normal probability density function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise

_PIECES = (
    Piece(
        lambda x: ~torch.isnan(x),
        lambda x: torch.exp(-(x**2) / 2) / math.sqrt(2 * math.pi),
    ),
)


@elementwise
def standard_normal_probability_density(x) -> Tensor:
    r"""Probability density function of the standard normal distribution.

    .. math::
        \phi(x) = \frac{1}{\sqrt{2\pi}} e^{-x^2/2}

    Parameters
    ----------
    x : Tensor or float
        Values.

    Returns
    -------
    Tensor
        PDF values, in the precision of ``x``.
    """
    return evaluate_piecewise(
        _PIECES, x, name="standard_normal_probability_density"
    )
