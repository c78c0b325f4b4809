from ._birnbaum_saunders_cumulative_distribution import (
    birnbaum_saunders_cumulative_distribution,
)
from ._birnbaum_saunders_probability_density import (
    birnbaum_saunders_probability_density,
)
from ._birnbaum_saunders_quantile import birnbaum_saunders_quantile
from ._birnbaum_saunders_random import birnbaum_saunders_random

__all__ = [
    "birnbaum_saunders_cumulative_distribution",
    "birnbaum_saunders_probability_density",
    "birnbaum_saunders_quantile",
    "birnbaum_saunders_random",
]
