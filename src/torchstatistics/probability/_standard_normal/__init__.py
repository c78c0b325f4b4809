from ._standard_normal_cumulative_distribution import (
    standard_normal_cumulative_distribution,
)
from ._standard_normal_probability_density import (
    standard_normal_probability_density,
)
from ._standard_normal_quantile import standard_normal_quantile
from ._standard_normal_random import standard_normal_random

__all__ = [
    "standard_normal_cumulative_distribution",
    "standard_normal_probability_density",
    "standard_normal_quantile",
    "standard_normal_random",
]
