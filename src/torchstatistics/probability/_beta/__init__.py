from ._beta_probability_density import beta_probability_density
from ._beta_random import beta_random

__all__ = [
    "beta_probability_density",
    "beta_random",
]
