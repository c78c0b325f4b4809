import math

import torch
from torch import Tensor


def valid_parameters(shape: Tensor, scale: Tensor, location: Tensor) -> Tensor:
    """Mask of positive finite shape and scale and finite location."""
    return (
        (shape > 0)
        & (shape < math.inf)
        & (scale > 0)
        & (scale < math.inf)
        & (location > -math.inf)
        & (location < math.inf)
    )


def standardize(
    x: Tensor, shape: Tensor, scale: Tensor, location: Tensor
) -> tuple[Tensor, Tensor]:
    r"""Return :math:`\sqrt{z}` and :math:`(\sqrt{z} - 1/\sqrt{z})/\gamma`."""
    root = torch.sqrt((x - location) / scale)
    return root, (root - 1 / root) / shape


def from_normal(y: Tensor, scale: Tensor, location: Tensor) -> Tensor:
    r"""Map :math:`y = \gamma \Phi^{-1}(p)` to the Birnbaum-Saunders variate.

    .. math::
        x = \mu + \beta \left(\frac{y + \sqrt{4 + y^2}}{2}\right)^2

    For negative ``y`` the equivalent :math:`2 / (\sqrt{4 + y^2} - y)` is
    used for the bracket, which does not cancel.
    """
    root = torch.sqrt(4 + y**2)
    half = torch.where(y < 0, 2 / (root - y), (y + root) / 2)
    return location + scale * half**2
