"""Standard normal quantile function."""

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise

_PIECES = (Piece(lambda p: (p >= 0) & (p <= 1), torch.special.ndtri),)


@elementwise
def standard_normal_quantile(p) -> Tensor:
    r"""Quantile function (inverse CDF) of the standard normal distribution.

    Parameters
    ----------
    p : Tensor or float
        Probabilities in [0, 1].

    Returns
    -------
    Tensor
        Quantiles; ``-inf`` at 0, ``inf`` at 1, NaN outside [0, 1].

    Examples
    --------
    >>> standard_normal_quantile(torch.tensor([0.025, 0.5, 0.975]))
    tensor([-1.9600,  0.0000,  1.9600])
    """
    return evaluate_piecewise(_PIECES, p, name="standard_normal_quantile")
