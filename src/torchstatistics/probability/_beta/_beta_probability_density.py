"""Beta probability density function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise


def _log_beta_function(a: Tensor, b: Tensor) -> Tensor:
    return (
        torch.special.gammaln(a)
        + torch.special.gammaln(b)
        - torch.special.gammaln(a + b)
    )


def _interior(x: Tensor, a: Tensor, b: Tensor) -> Tensor:
    return torch.exp(
        (a - 1) * torch.log(x)
        + (b - 1) * torch.log1p(-x)
        - _log_beta_function(a, b)
    )


_PIECES = (
    # Outside the support.
    Piece(lambda x, a, b: (a > 0) & (b > 0) & ~torch.isnan(x), 0.0),
    Piece(
        lambda x, a, b: (x > 0)
        & (x < 1)
        & (a > 0)
        & (b > 0)
        & ((a != 1) | (b != 1)),
        _interior,
    ),
    # Finite limits at the boundary.
    Piece(
        lambda x, a, b: (x == 0) & (a == 1) & (b > 0) & (b != 1),
        lambda x, a, b: torch.exp(-_log_beta_function(a, b)),
    ),
    Piece(
        lambda x, a, b: (x == 1) & (b == 1) & (a > 0) & (a != 1),
        lambda x, a, b: torch.exp(-_log_beta_function(a, b)),
    ),
    # Uniform.
    Piece(lambda x, a, b: (x >= 0) & (x <= 1) & (a == 1) & (b == 1), 1.0),
    # Infinite density at the boundary.
    Piece(lambda x, a, b: (x == 0) & (a > 0) & (a < 1) & (b > 0), math.inf),
    Piece(lambda x, a, b: (x == 1) & (b > 0) & (b < 1) & (a > 0), math.inf),
)


@elementwise
def beta_probability_density(x, a, b) -> Tensor:
    r"""Probability density function of the beta distribution.

    .. math::
        f(x; a, b) = \frac{x^{a-1} (1-x)^{b-1}}{B(a, b)}

    where :math:`B(a, b)` is the beta function.

    Parameters
    ----------
    x : Tensor or float
        Values.
    a : Tensor or float
        First shape parameter. Must be positive.
    b : Tensor or float
        Second shape parameter. Must be positive.

    Returns
    -------
    Tensor
        PDF values of the common shape of ``x``, ``a`` and ``b``. Zero outside
        [0, 1], ``inf`` at ``x = 0`` when ``a < 1`` and at ``x = 1`` when
        ``b < 1``, NaN where ``x`` is NaN or a parameter is not positive.

    Examples
    --------
    >>> x = torch.tensor([-1.0, 0.0, 0.5, 1.0, 2.0])
    >>> beta_probability_density(x, 1.0, 2.0)
    tensor([0., 2., 1., 0., 0.])
    """
    return evaluate_piecewise(
        _PIECES, x, a, b, name="beta_probability_density"
    )
