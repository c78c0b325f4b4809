"""Hypothesis strategies for distribution function testing."""

from ._positive_real_numbers import positive_real_numbers
from ._probabilities import probabilities
from ._real_number_dtypes import real_number_dtypes
from ._shapes import shapes
from ._size_arguments import size_arguments

__all__ = [
    # Numeric strategies
    "positive_real_numbers",
    "probabilities",
    # Shape strategies
    "shapes",
    "size_arguments",
    # Dtype strategies
    "real_number_dtypes",
]
