"""Birnbaum-Saunders quantile function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._birnbaum_saunders_parameters import from_normal, valid_parameters

_PIECES = (
    Piece(
        lambda p, g, b, mu: (p == 0) & valid_parameters(g, b, mu),
        lambda p, g, b, mu: mu,
    ),
    Piece(lambda p, g, b, mu: (p == 1) & valid_parameters(g, b, mu), math.inf),
    Piece(
        lambda p, g, b, mu: (p > 0) & (p < 1) & valid_parameters(g, b, mu),
        lambda p, g, b, mu: from_normal(g * torch.special.ndtri(p), b, mu),
    ),
)


@elementwise
def birnbaum_saunders_quantile(p, shape, scale, location) -> Tensor:
    r"""Quantile function (inverse CDF) of the Birnbaum-Saunders distribution.

    .. math::
        Q(p) = \mu + \beta \left(\frac{y + \sqrt{4 + y^2}}{2}\right)^2,
        \quad y = \gamma \Phi^{-1}(p)

    Parameters
    ----------
    p : Tensor or float
        Probabilities in [0, 1].
    shape : Tensor or float
        Shape parameter gamma. Must be positive and finite.
    scale : Tensor or float
        Scale parameter beta. Must be positive and finite.
    location : Tensor or float
        Location parameter mu. Must be finite.

    Returns
    -------
    Tensor
        Quantiles: ``location`` at ``p = 0``, ``inf`` at ``p = 1``.
    """
    return evaluate_piecewise(
        _PIECES,
        p,
        shape,
        scale,
        location,
        name="birnbaum_saunders_quantile",
    )
