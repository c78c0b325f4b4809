from ._nakagami_cumulative_distribution import nakagami_cumulative_distribution
from ._nakagami_probability_density import nakagami_probability_density
from ._nakagami_quantile import nakagami_quantile
from ._nakagami_random import nakagami_random

__all__ = [
    "nakagami_cumulative_distribution",
    "nakagami_probability_density",
    "nakagami_quantile",
    "nakagami_random",
]
