"""Birnbaum-Saunders probability density function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._birnbaum_saunders_parameters import valid_parameters


def _interior(
    x: Tensor, shape: Tensor, scale: Tensor, location: Tensor
) -> Tensor:
    # Log space: near the location the prefactor overflows while the
    # exponential underflows.
    finfo = torch.finfo(x.dtype)
    z = torch.clamp((x - location) / scale, min=finfo.tiny, max=finfo.max)
    root = torch.sqrt(z)
    s = (root - 1 / root) / shape
    return torch.exp(
        torch.log1p(z)
        - 1.5 * torch.log(z)
        - torch.log(2 * shape)
        - torch.log(scale)
        - s**2 / 2
    ) / math.sqrt(2 * math.pi)


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
)


@elementwise
def birnbaum_saunders_probability_density(x, shape, scale, location) -> Tensor:
    r"""Probability density function of the Birnbaum-Saunders distribution.

    With :math:`z = (x - \mu)/\beta`,

    .. math::
        f(x; \gamma, \beta, \mu) = \frac{\sqrt{z} + 1/\sqrt{z}}{2 \gamma (x - \mu)}
            \phi\left(\frac{\sqrt{z} - 1/\sqrt{z}}{\gamma}\right)

    for :math:`x > \mu`, where :math:`\phi` is the standard normal density.

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
        PDF values; zero for ``x <= location``.
    """
    return evaluate_piecewise(
        _PIECES,
        x,
        shape,
        scale,
        location,
        name="birnbaum_saunders_probability_density",
    )
