from ._convergence import check_convergence, check_residual, default_tolerances
from ._exceptions import ConvergenceWarning
from ._newton import newton

__all__ = [
    "check_convergence",
    "check_residual",
    "default_tolerances",
    "newton",
    "ConvergenceWarning",
]
