"""Gamma quantile function."""

import math

from torch import Tensor

from ...special_functions import regularized_gamma_inverse
from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._gamma_parameters import valid_parameters


@elementwise
def gamma_quantile(
    p, shape, scale, *, tolerance: float | None = None
) -> Tensor:
    r"""Quantile function (inverse CDF) of the gamma distribution.

    .. math::
        Q(p; k, \theta) = \theta \, P^{-1}(k, p)

    The inverse of the regularized incomplete gamma function has no closed
    form and is found by Newton's method, see
    :func:`torchstatistics.special_functions.regularized_gamma_inverse`.

    Parameters
    ----------
    p : Tensor or float
        Probabilities in [0, 1].
    shape : Tensor or float
        Shape parameter k. Must be positive and finite.
    scale : Tensor or float
        Scale parameter theta. Must be positive and finite.
    tolerance : float, optional
        Largest accepted relative residual ``|F(x) - p| / p`` before a
        :class:`ConvergenceWarning` is issued. Default: square root of the
        machine epsilon of the result dtype.

    Returns
    -------
    Tensor
        Quantiles: 0 at ``p = 0``, ``inf`` at ``p = 1``, NaN for ``p``
        outside [0, 1] or invalid parameters.

    Warns
    -----
    ConvergenceWarning
        If any quantile fails to reproduce its probability. All estimates
        are returned regardless.

    Examples
    --------
    >>> p = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
    >>> gamma_quantile(p, 2.0, 2.0)
    tensor([0.0000, 3.3567,    inf], dtype=torch.float64)
    """

    def interior(p: Tensor, k: Tensor, theta: Tensor) -> Tensor:
        return theta * regularized_gamma_inverse(
            p, k, tolerance=tolerance, name="gamma_quantile"
        )

    pieces = (
        Piece(lambda p, k, theta: (p == 0) & valid_parameters(k, theta), 0.0),
        Piece(
            lambda p, k, theta: (p == 1) & valid_parameters(k, theta),
            math.inf,
        ),
        Piece(
            lambda p, k, theta: (p > 0) & (p < 1) & valid_parameters(k, theta),
            interior,
        ),
    )

    return evaluate_piecewise(pieces, p, shape, scale, name="gamma_quantile")
