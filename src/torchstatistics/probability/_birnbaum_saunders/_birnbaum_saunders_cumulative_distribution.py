"""Birnbaum-Saunders cumulative distribution function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._birnbaum_saunders_parameters import standardize, valid_parameters


def _interior(
    x: Tensor, shape: Tensor, scale: Tensor, location: Tensor
) -> Tensor:
    _, s = standardize(x, shape, scale, location)
    return torch.special.ndtr(s)


_PIECES = (
    Piece(
        lambda x, g, b, mu: valid_parameters(g, b, mu) & ~torch.isnan(x), 0.0
    ),
    Piece(
        lambda x, g, b, mu: (x > mu)
        & (x < math.inf)
        & valid_parameters(g, b, mu),
        _interior,
    ),
    Piece(
        lambda x, g, b, mu: (x == math.inf) & valid_parameters(g, b, mu), 1.0
    ),
)


@elementwise
def birnbaum_saunders_cumulative_distribution(
    x, shape, scale, location
) -> Tensor:
    r"""Cumulative distribution function of the Birnbaum-Saunders distribution.

    .. math::
        F(x; \gamma, \beta, \mu) = \Phi\left(\frac{\sqrt{z} - 1/\sqrt{z}}{\gamma}\right),
        \quad z = \frac{x - \mu}{\beta}

    Parameters
    ----------
    x : Tensor or float
        Values.
    shape : Tensor or float
        Shape parameter gamma. Must be positive and finite.
    scale : Tensor or float
        Scale parameter beta. Must be positive and finite.
    location : Tensor or float
        Location parameter mu. Must be finite.

    Returns
    -------
    Tensor
        CDF values.
    """
    return evaluate_piecewise(
        _PIECES,
        x,
        shape,
        scale,
        location,
        name="birnbaum_saunders_cumulative_distribution",
    )
