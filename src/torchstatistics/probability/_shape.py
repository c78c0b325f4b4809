"""Common output shape of element-wise distribution functions."""

import operator
from typing import Any, Sequence

import torch
from torch import Tensor

from ._exceptions import InvalidDimensionsError, ShapeMismatchError


def _as_dimension(value: Any) -> int | None:
    """Return ``value`` as a non-negative integer, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if getattr(value, "ndim", 0) != 0:
        return None
    if isinstance(value, Tensor) and value.dtype == torch.bool:
        return None
    try:
        dimension = operator.index(value)
    except TypeError:
        return None
    if dimension < 0:
        return None
    return dimension


def resolve_size(size: Sequence[Any], *, name: str) -> torch.Size | None:
    r"""Shape requested by the trailing size arguments of a random generator.

    - no arguments: None, the shape follows the parameters;
    - one non-negative integer ``n``: ``(n, n)``;
    - one 1-D sequence of non-negative integers: that shape;
    - two or more non-negative integers: those dimensions in order.

    Raises
    ------
    InvalidDimensionsError
        If any dimension is negative or not an integer, or if a single
        size argument is neither an integer nor a 1-D sequence.
    """
    if len(size) == 0:
        return None

    if len(size) == 1:
        (dims,) = size

        dimension = _as_dimension(dims)
        if dimension is not None:
            return torch.Size([dimension, dimension])

        if isinstance(dims, (list, tuple, torch.Size)):
            dims = list(dims)
        elif getattr(dims, "ndim", None) == 1:
            dims = dims.tolist()
        else:
            raise InvalidDimensionsError(
                f"{name}: dimension vector must be a 1-D sequence of "
                f"non-negative integers."
            )

        dimensions = [_as_dimension(d) for d in dims]
        if any(d is None for d in dimensions):
            raise InvalidDimensionsError(
                f"{name}: dimension vector must be a 1-D sequence of "
                f"non-negative integers."
            )
        return torch.Size(dimensions)

    dimensions = [_as_dimension(d) for d in size]
    if any(d is None for d in dimensions):
        raise InvalidDimensionsError(
            f"{name}: dimensions must be non-negative integers."
        )
    return torch.Size(dimensions)


def resolve_shape(
    *values: Tensor, size: Sequence[Any] = (), name: str
) -> torch.Size:
    r"""Common shape of ``values`` and an optional size specification.

    Scalars (0-d tensors) take the shape of the other inputs. Every
    non-scalar input must have exactly the same shape; there is no
    broadcasting of size-1 dimensions.

    Parameters
    ----------
    *values : Tensor
        Parameter tensors.
    size : Sequence
        Trailing size arguments of a random generator, see
        :func:`resolve_size`.
    name : str
        Function name used in error messages.

    Returns
    -------
    torch.Size
        ``()`` when every input is scalar and no size is requested.

    Raises
    ------
    ShapeMismatchError
        If two non-scalar inputs differ in shape, or if their shape differs
        from the requested size.
    InvalidDimensionsError
        If the size specification is invalid.
    """
    shape = None
    for value in values:
        if value.ndim == 0:
            continue
        if shape is None:
            shape = value.shape
        elif value.shape != shape:
            raise ShapeMismatchError(
                f"{name}: inputs must be of common size or scalars, got "
                f"shapes {tuple(shape)} and {tuple(value.shape)}."
            )

    requested = resolve_size(size, name=name)

    if requested is None:
        return shape if shape is not None else torch.Size([])

    if shape is not None and shape != requested:
        raise ShapeMismatchError(
            f"{name}: inputs must be scalar or of size {tuple(requested)}, "
            f"got shape {tuple(shape)}."
        )

    return requested
