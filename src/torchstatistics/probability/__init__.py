"""Element-wise probability distributions: PDF, CDF, quantile and variates.

Every function accepts tensors, NumPy arrays, Python sequences or Python
numbers. Non-scalar inputs must share one shape; scalars act as tensors of
that shape. Invalid parameters give NaN, never an exception.

Example
-------
>>> import torch
>>> from torchstatistics.probability import beta_probability_density, gamma_quantile
>>>
>>> x = torch.tensor([-1.0, 0.0, 0.5, 1.0, 2.0])
>>> beta_probability_density(x, 1.0, 2.0)  # tensor([0., 2., 1., 0., 0.])
>>>
>>> p = torch.tensor([0.025, 0.5, 0.975], dtype=torch.float64)
>>> gamma_quantile(p, 3.0, 5.0)
"""

from ._beta import beta_probability_density, beta_random
from ._birnbaum_saunders import (
    birnbaum_saunders_cumulative_distribution,
    birnbaum_saunders_probability_density,
    birnbaum_saunders_quantile,
    birnbaum_saunders_random,
)
from ._exceptions import (
    ArgumentCountError,
    ComplexInputError,
    ConvergenceWarning,
    InvalidDimensionsError,
    ProbabilityError,
    ShapeMismatchError,
)
from ._gamma import (
    gamma_cumulative_distribution,
    gamma_probability_density,
    gamma_quantile,
    gamma_random,
)
from ._nakagami import (
    nakagami_cumulative_distribution,
    nakagami_probability_density,
    nakagami_quantile,
    nakagami_random,
)
from ._precision import Precision, result_precision
from ._standard_normal import (
    standard_normal_cumulative_distribution,
    standard_normal_probability_density,
    standard_normal_quantile,
    standard_normal_random,
)

__all__ = [
    "ArgumentCountError",
    "ComplexInputError",
    "ConvergenceWarning",
    "InvalidDimensionsError",
    "Precision",
    "ProbabilityError",
    "ShapeMismatchError",
    "result_precision",
    # Beta distribution
    "beta_probability_density",
    "beta_random",
    # Birnbaum-Saunders distribution
    "birnbaum_saunders_cumulative_distribution",
    "birnbaum_saunders_probability_density",
    "birnbaum_saunders_quantile",
    "birnbaum_saunders_random",
    # Gamma distribution
    "gamma_cumulative_distribution",
    "gamma_probability_density",
    "gamma_quantile",
    "gamma_random",
    # Nakagami distribution
    "nakagami_cumulative_distribution",
    "nakagami_probability_density",
    "nakagami_quantile",
    "nakagami_random",
    # Standard normal distribution
    "standard_normal_cumulative_distribution",
    "standard_normal_probability_density",
    "standard_normal_quantile",
    "standard_normal_random",
]
