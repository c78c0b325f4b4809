"""Nakagami quantile function."""

import math

import torch
from torch import Tensor

from ...special_functions import regularized_gamma_inverse
from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._nakagami_parameters import valid_parameters


@elementwise
def nakagami_quantile(
    p, m, omega, *, tolerance: float | None = None
) -> Tensor:
    r"""Quantile function (inverse CDF) of the Nakagami distribution.

    .. math::
        Q(p; m, \Omega) = \sqrt{\frac{\Omega}{m} P^{-1}(m, p)}

    Parameters
    ----------
    p : Tensor or float
        Probabilities in [0, 1].
    m : Tensor or float
        Shape parameter. Must be at least 1/2.
    omega : Tensor or float
        Spread parameter. Must be positive.
    tolerance : float, optional
        Largest accepted relative residual before a
        :class:`ConvergenceWarning` is issued. Default: square root of the
        machine epsilon of the result dtype.

    Returns
    -------
    Tensor
        Quantiles.
    """

    def interior(p: Tensor, m: Tensor, w: Tensor) -> Tensor:
        x = regularized_gamma_inverse(
            p, m, tolerance=tolerance, name="nakagami_quantile"
        )
        return torch.sqrt(w / m * x)

    pieces = (
        Piece(lambda p, m, w: (p == 0) & valid_parameters(m, w), 0.0),
        Piece(lambda p, m, w: (p == 1) & valid_parameters(m, w), math.inf),
        Piece(
            lambda p, m, w: (p > 0) & (p < 1) & valid_parameters(m, w),
            interior,
        ),
    )

    return evaluate_piecewise(pieces, p, m, omega, name="nakagami_quantile")
