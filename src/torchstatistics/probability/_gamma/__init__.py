from ._gamma_cumulative_distribution import gamma_cumulative_distribution
from ._gamma_probability_density import gamma_probability_density
from ._gamma_quantile import gamma_quantile
from ._gamma_random import gamma_random

__all__ = [
    "gamma_cumulative_distribution",
    "gamma_probability_density",
    "gamma_quantile",
    "gamma_random",
]
