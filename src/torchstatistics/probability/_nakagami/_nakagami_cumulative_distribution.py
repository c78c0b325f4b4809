"""Nakagami cumulative distribution function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._nakagami_parameters import valid_parameters

_PIECES = (
    Piece(lambda x, m, w: valid_parameters(m, w) & ~torch.isnan(x), 0.0),
    Piece(
        lambda x, m, w: (x > 0) & valid_parameters(m, w),
        lambda x, m, w: torch.special.gammainc(m, (m / w) * x**2),
    ),
    Piece(lambda x, m, w: (x == math.inf) & valid_parameters(m, w), 1.0),
)


@elementwise
def nakagami_cumulative_distribution(x, m, omega) -> Tensor:
    r"""Cumulative distribution function of the Nakagami distribution.

    .. math::
        F(x; m, \Omega) = P\left(m, \frac{m}{\Omega} x^2\right)

    Parameters
    ----------
    x : Tensor or float
        Values.
    m : Tensor or float
        Shape parameter. Must be at least 1/2.
    omega : Tensor or float
        Spread parameter. Must be positive.

    Returns
    -------
    Tensor
        CDF values.
    """
    return evaluate_piecewise(
        _PIECES, x, m, omega, name="nakagami_cumulative_distribution"
    )
