import math

from torch import Tensor


def valid_parameters(shape: Tensor, scale: Tensor) -> Tensor:
    """Mask of positive, finite shape and scale parameters."""
    return (shape > 0) & (shape < math.inf) & (scale > 0) & (scale < math.inf)
