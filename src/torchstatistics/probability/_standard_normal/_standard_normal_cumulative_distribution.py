"""Standard normal cumulative distribution function."""

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise

_PIECES = (Piece(lambda x: ~torch.isnan(x), torch.special.ndtr),)


@elementwise
def standard_normal_cumulative_distribution(x) -> Tensor:
    r"""Cumulative distribution function of the standard normal distribution.

    .. math::
        \Phi(x) = \frac{1}{2}\left(1 + \operatorname{erf}(x/\sqrt{2})\right)

    Parameters
    ----------
    x : Tensor or float
        Values.

    Returns
    -------
    Tensor
        CDF values.
    """
    return evaluate_piecewise(
        _PIECES, x, name="standard_normal_cumulative_distribution"
    )
