"""Result precision of element-wise distribution functions."""

import enum
import functools
from typing import Any

import torch
from torch import Tensor


class Precision(enum.Enum):
    """Floating-point precision of a distribution function result."""

    REDUCED = torch.float32
    STANDARD = torch.float64

    @property
    def dtype(self) -> torch.dtype:
        return self.value


def precision_of(value: Any) -> Precision | None:
    r"""Declared precision of one input.

    Python numbers and Python sequences declare no precision; like Python
    scalars in PyTorch type promotion they adapt to the other operands.
    Integer and boolean tensors declare none either.

    Parameters
    ----------
    value : Any
        A tensor, NumPy array, Python sequence or Python number.

    Returns
    -------
    Precision or None
        ``Precision.STANDARD`` for ``float64`` values, ``Precision.REDUCED``
        for narrower floating-point values, ``None`` otherwise.
    """
    if isinstance(value, (bool, int, float, list, tuple)):
        return None

    if isinstance(value, Tensor):
        dtype = value.dtype
    else:
        dtype = torch.as_tensor(value).dtype

    if dtype == torch.float64:
        return Precision.STANDARD
    if dtype.is_floating_point:
        return Precision.REDUCED
    return None


def _promote(
    current: Precision | None, other: Precision | None
) -> Precision | None:
    if Precision.STANDARD in (current, other):
        return Precision.STANDARD
    return current or other


def result_precision(*values: Any) -> Precision:
    r"""Precision of the result computed from ``values``.

    The result is reduced precision if and only if no input declares
    standard precision and at least one declares reduced precision.

    Examples
    --------
    >>> result_precision(torch.tensor(1.0), 2.0)
    <Precision.REDUCED: torch.float32>
    >>> result_precision(torch.tensor(1.0), torch.tensor(2.0, dtype=torch.float64))
    <Precision.STANDARD: torch.float64>
    >>> result_precision(1.0, [2.0, 3.0])
    <Precision.STANDARD: torch.float64>
    """
    precision = functools.reduce(_promote, map(precision_of, values), None)
    return precision or Precision.STANDARD
