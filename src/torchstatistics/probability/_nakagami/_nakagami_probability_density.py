"""Nakagami probability density function."""

import math

import torch
from torch import Tensor

from .._piecewise import Piece, elementwise, evaluate_piecewise
from ._nakagami_parameters import valid_parameters


def _interior(x: Tensor, m: Tensor, omega: Tensor) -> Tensor:
    return torch.exp(
        math.log(2)
        + m * torch.log(m)
        - torch.special.gammaln(m)
        - m * torch.log(omega)
        + (2 * m - 1) * torch.log(x)
        - (m / omega) * x**2
    )


_PIECES = (
    Piece(lambda x, m, w: valid_parameters(m, w) & ~torch.isnan(x), 0.0),
    Piece(
        lambda x, m, w: (x > 0) & (x < math.inf) & valid_parameters(m, w),
        _interior,
    ),
    # Half-normal limit at the origin.
    Piece(
        lambda x, m, w: (x == 0) & (m == 0.5) & valid_parameters(m, w),
        lambda x, m, w: torch.sqrt(2 / (math.pi * w)),
    ),
)


@elementwise
def nakagami_probability_density(x, m, omega) -> Tensor:
    r"""Probability density function of the Nakagami distribution.

    .. math::
        f(x; m, \Omega) = \frac{2 m^m}{\Gamma(m) \Omega^m}
            x^{2m-1} \exp\left(-\frac{m}{\Omega} x^2\right)

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
        PDF values; zero for ``x < 0`` and ``x = inf``, and at ``x = 0``
        unless ``m = 1/2``.

    Examples
    --------
    >>> x = torch.tensor([-1.0, 0.0, 1.0, 2.0, math.inf], dtype=torch.float64)
    >>> nakagami_probability_density(x, 1.0, 1.0)
    tensor([0.0000, 0.0000, 0.7358, 0.0733, 0.0000], dtype=torch.float64)
    """
    return evaluate_piecewise(
        _PIECES, x, m, omega, name="nakagami_probability_density"
    )
