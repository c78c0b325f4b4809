"""Hypothesis strategies for testing element-wise distribution functions."""

from . import strategies

__all__ = [
    "strategies",
]
