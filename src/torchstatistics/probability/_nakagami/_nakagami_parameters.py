import math

from torch import Tensor


def valid_parameters(m: Tensor, omega: Tensor) -> Tensor:
    """Mask of shape ``m >= 1/2`` and positive spread, both finite."""
    return (m >= 0.5) & (m < math.inf) & (omega > 0) & (omega < math.inf)
