"""Gamma probability density function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._gamma_parameters import valid_parameters


def _interior(x: Tensor, shape: Tensor, scale: Tensor) -> Tensor:
    return torch.exp(
        (shape - 1) * torch.log(x)
        - x / scale
        - torch.special.gammaln(shape)
        - shape * torch.log(scale)
    )


_PIECES = (
    Piece(
        lambda x, k, theta: valid_parameters(k, theta) & ~torch.isnan(x),
        0.0,
    ),
    Piece(
        lambda x, k, theta: (x > 0)
        & (x < math.inf)
        & valid_parameters(k, theta),
        _interior,
    ),
    Piece(
        lambda x, k, theta: (x == 0) & (k == 1) & valid_parameters(k, theta),
        lambda x, k, theta: 1 / theta,
    ),
    Piece(
        lambda x, k, theta: (x == 0) & (k < 1) & valid_parameters(k, theta),
        math.inf,
    ),
)


@elementwise
def gamma_probability_density(x, shape, scale) -> Tensor:
    r"""Probability density function of the gamma distribution.

    .. math::
        f(x; k, \theta) = \frac{x^{k-1} e^{-x/\theta}}{\theta^k \Gamma(k)}

    Parameters
    ----------
    x : Tensor or float
        Values.
    shape : Tensor or float
        Shape parameter k. Must be positive and finite.
    scale : Tensor or float
        Scale parameter theta. Must be positive and finite.

    Returns
    -------
    Tensor
        PDF values. Zero for negative ``x``; at ``x = 0`` the limit
        ``1/theta`` when ``k = 1`` and ``inf`` when ``k < 1``.
    """
    return evaluate_piecewise(
        _PIECES, x, shape, scale, name="gamma_probability_density"
    )
