"""Newton-Raphson root finding method."""

from typing import Callable

import torch
from torch import Tensor

from ._convergence import check_convergence, default_tolerances


def _compute_derivative_batched(
    f: Callable[[Tensor], Tensor],
    x: Tensor,
    *,
    df: Callable[[Tensor], Tensor] | None = None,
) -> Tensor:
    """Compute the derivative of an element-wise function.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise function that maps (B,) -> (B,).
    x : Tensor
        Points at which to evaluate the derivative. Shape (B,).
    df : Callable[[Tensor], Tensor] or None
        Optional explicit derivative function.

    Returns
    -------
    Tensor
        Derivative values at x. Shape (B,).
    """
    if df is not None:
        return df(x)

    # For element-wise f the gradient of sum(f(x)) is [df/dx_1, df/dx_2, ...]
    x_grad = x.detach().requires_grad_(True)
    with torch.enable_grad():
        fx = f(x_grad)
        grad = torch.autograd.grad(fx.sum(), x_grad)[0]
    return grad


def newton(
    f: Callable[[Tensor], Tensor],
    x0: Tensor,
    *,
    df: Callable[[Tensor], Tensor] | None = None,
    xtol: float | None = None,
    rtol: float | None = None,
    ftol: float | None = None,
    maxiter: int = 50,
) -> tuple[Tensor, Tensor]:
    """
    Find roots of f(x) = 0 using Newton-Raphson method.

    Every element is an independent problem: ``f`` must be element-wise, so
    the iteration on one element never depends on another.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Vectorized function. Takes tensor of shape ``(N,)``, returns ``(N,)``.
    x0 : Tensor
        Initial guess for the root. Any shape; flattened for processing.
    df : Callable[[Tensor], Tensor], optional
        Explicit derivative function. If None (default), the derivative is
        computed using autodiff.
    xtol : float, optional
        Absolute tolerance on x change. Convergence requires
        ``|x_new - x_old| < xtol + rtol * |x_old|``.
        Default: dtype-aware, see :func:`default_tolerances`.
    rtol : float, optional
        Relative tolerance on x change. Default: dtype-aware.
    ftol : float, optional
        Tolerance on residual. Convergence requires ``|f(x)| < ftol``.
        Default: dtype-aware.
    maxiter : int, default=50
        Maximum iterations. Non-converged elements will have converged=False.

    Returns
    -------
    tuple[Tensor, Tensor]
        - **root** -- Roots with the same shape as input ``x0``.
          For non-converged elements, this is the best estimate.
        - **converged** -- Boolean tensor with the same shape indicating
          which elements converged within maxiter iterations.

    Examples
    --------
    Batched root-finding (find sqrt(2), sqrt(3), sqrt(4)):

    >>> c = torch.tensor([2.0, 3.0, 4.0])
    >>> roots, converged = newton(lambda x: x**2 - c, torch.full((3,), 1.5))
    >>> [f"{v:.4f}" for v in roots.tolist()]
    ['1.4142', '1.7321', '2.0000']

    Notes
    -----
    When ``|f'(x)| < eps`` the step uses ``sign(f'(x)) * eps`` instead, so
    the iteration continues with a large step rather than dividing by zero.
    """
    orig_shape = x0.shape

    if x0.numel() == 0:
        return x0.clone(), torch.ones(
            orig_shape, dtype=torch.bool, device=x0.device
        )

    x = x0.flatten().clone()

    dtype = x.dtype
    defaults = default_tolerances(dtype)
    if xtol is None:
        xtol = defaults["xtol"]
    if rtol is None:
        rtol = defaults["rtol"]
    if ftol is None:
        ftol = defaults["ftol"]

    converged = torch.zeros(x.shape, dtype=torch.bool, device=x.device)
    result = x.clone()

    eps = torch.finfo(dtype).eps * 10

    for _ in range(maxiter):
        fx = f(x)
        dfx = _compute_derivative_batched(f, x, df=df)

        safe_dfx = torch.where(
            torch.abs(dfx) < eps,
            torch.sign(dfx) * eps,
            dfx,
        )
        # sign(0) == 0
        safe_dfx = torch.where(safe_dfx == 0, eps, safe_dfx)

        x_new = x - fx / safe_dfx

        newly_converged = check_convergence(
            x, x_new, f(x_new), xtol, rtol, ftol
        )
        newly_converged = newly_converged & ~converged

        result = torch.where(newly_converged, x_new, result)
        converged = converged | newly_converged

        if torch.all(converged):
            return result.reshape(orig_shape), converged.reshape(orig_shape)

        x = torch.where(converged, x, x_new)

    result = torch.where(converged, result, x)
    return result.reshape(orig_shape), converged.reshape(orig_shape)
