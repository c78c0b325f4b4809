"""Convergence utilities for root finding."""

import math
import warnings

import torch
from torch import Tensor

from ._exceptions import ConvergenceWarning


def default_tolerances(dtype: torch.dtype) -> dict[str, float]:
    """Return dtype-appropriate default tolerances.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    dict[str, float]
        Dictionary with keys 'xtol', 'rtol', 'ftol' and 'residual'. The
        'residual' entry is the square root of the machine epsilon of
        ``dtype`` and bounds the relative error ``|F(x) - p| / p`` that a
        solved quantile may leave behind before a warning is issued.
    """
    residual = math.sqrt(torch.finfo(dtype).eps)
    if dtype in (torch.float16, torch.bfloat16):
        return {"xtol": 1e-3, "rtol": 1e-2, "ftol": 1e-3, "residual": residual}
    elif dtype == torch.float32:
        return {"xtol": 1e-6, "rtol": 1e-5, "ftol": 1e-6, "residual": residual}
    else:  # float64
        return {
            "xtol": 1e-12,
            "rtol": 1e-9,
            "ftol": 1e-12,
            "residual": residual,
        }


def check_convergence(
    x_old: Tensor,
    x_new: Tensor,
    f_new: Tensor,
    xtol: float,
    rtol: float,
    ftol: float,
) -> Tensor:
    """Check convergence for each element.

    Convergence is achieved when EITHER:
    - |x_new - x_old| < xtol + rtol * |x_old| (x converged)
    - |f_new| < ftol (f converged)

    Parameters
    ----------
    x_old : Tensor
        Previous x values.
    x_new : Tensor
        Current x values.
    f_new : Tensor
        Current function values.
    xtol : float
        Absolute tolerance on x.
    rtol : float
        Relative tolerance on x.
    ftol : float
        Tolerance on function value.

    Returns
    -------
    Tensor
        Boolean mask where True indicates convergence.
    """
    x_converged = torch.abs(x_new - x_old) < xtol + rtol * torch.abs(x_old)
    f_converged = torch.abs(f_new) < ftol
    return x_converged | f_converged


def check_residual(
    value: Tensor,
    target: Tensor,
    tolerance: float | None = None,
    *,
    name: str = "root_finding",
) -> Tensor:
    """Compare a forward evaluation against its target and warn on failure.

    Parameters
    ----------
    value : Tensor
        Forward relation evaluated at the estimated roots, ``F(x)``.
    target : Tensor
        Values the forward relation should reproduce, ``p``. Must be nonzero.
    tolerance : float, optional
        Largest accepted relative residual ``|F(x) - p| / p``.
        Default: ``default_tolerances(value.dtype)["residual"]``.
    name : str
        Prefix of the warning message, normally the public function name.

    Returns
    -------
    Tensor
        Boolean mask, True where the residual exceeds ``tolerance``.

    Warns
    -----
    ConvergenceWarning
        Once per call if any element exceeds ``tolerance``.
    """
    if tolerance is None:
        tolerance = default_tolerances(value.dtype)["residual"]

    failed = (torch.abs(value - target) / target) > tolerance

    if bool(failed.any()):
        warnings.warn(
            f"{name}: calculation failed to converge for "
            f"{int(failed.sum())} of {failed.numel()} values.",
            ConvergenceWarning,
            stacklevel=2,
        )

    return failed
