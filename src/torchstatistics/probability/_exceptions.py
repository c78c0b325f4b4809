"""Probability module exceptions."""

from ..root_finding import ConvergenceWarning

__all__ = [
    "ArgumentCountError",
    "ComplexInputError",
    "ConvergenceWarning",
    "InvalidDimensionsError",
    "ProbabilityError",
    "ShapeMismatchError",
]


class ProbabilityError(ValueError):
    """Base exception for probability module errors."""

    pass


class ArgumentCountError(ProbabilityError, TypeError):
    """Raised when a function is called with the wrong number of arguments."""

    pass


class ShapeMismatchError(ProbabilityError):
    """Raised when non-scalar inputs do not share one shape."""

    pass


class InvalidDimensionsError(ProbabilityError):
    """Raised when a size specification is invalid."""

    pass


class ComplexInputError(ProbabilityError, TypeError):
    """Raised when any input is complex-valued."""

    pass
