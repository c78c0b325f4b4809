"""Gamma cumulative distribution function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._gamma_parameters import valid_parameters

_PIECES = (
    Piece(
        lambda x, k, theta: valid_parameters(k, theta) & ~torch.isnan(x),
        0.0,
    ),
    Piece(
        lambda x, k, theta: (x > 0) & valid_parameters(k, theta),
        lambda x, k, theta: torch.special.gammainc(k, x / theta),
    ),
    Piece(
        lambda x, k, theta: (x == math.inf) & valid_parameters(k, theta),
        1.0,
    ),
)


@elementwise
def gamma_cumulative_distribution(x, shape, scale) -> Tensor:
    r"""Cumulative distribution function of the gamma distribution.

    .. math::
        F(x; k, \theta) = P(k, x/\theta)

    where :math:`P(a, x)` is the regularized lower incomplete gamma function.

    Parameters
    ----------
    x : Tensor or float
        Quantiles.
    shape : Tensor or float
        Shape parameter k. Must be positive and finite.
    scale : Tensor or float
        Scale parameter theta. Must be positive and finite.

    Returns
    -------
    Tensor
        CDF values.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> gamma_cumulative_distribution(x, 2.0, 1.0)
    tensor([0.2642, 0.5940, 0.8009])
    """
    return evaluate_piecewise(
        _PIECES, x, shape, scale, name="gamma_cumulative_distribution"
    )
