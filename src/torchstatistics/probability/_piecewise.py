"""Piecewise element-wise evaluation of distribution functions."""

import functools
import inspect
import math
from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union

import torch
from torch import Tensor

from ._exceptions import ArgumentCountError, ComplexInputError
from ._precision import result_precision
from ._shape import resolve_shape


@dataclass(frozen=True)
class Piece:
    r"""One domain class of a piecewise-defined function.

    Attributes
    ----------
    condition : Callable[..., Tensor]
        Maps the broadcast parameters to a boolean mask selecting the
        elements of this class. Only comparisons belong here: it is evaluated
        on every element.
    value : Callable[..., Tensor] or float
        Constant, or formula evaluated on the gathered elements of the mask
        only. Formulas receive 1-D tensors, one per parameter.
    """

    condition: Callable[..., Tensor]
    value: Union[Callable[..., Tensor], float]


@dataclass(frozen=True)
class Broadcast:
    """Parameters cast to the result dtype and expanded to the common shape."""

    parameters: tuple[Tensor, ...]
    shape: torch.Size
    dtype: torch.dtype
    device: torch.device | None

    def new_output(self) -> Tensor:
        return torch.full(
            self.shape, math.nan, dtype=self.dtype, device=self.device
        )


def elementwise(function: Callable) -> Callable:
    r"""Raise :class:`ArgumentCountError` on calls that do not bind."""
    signature = inspect.signature(function)

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            signature.bind(*args, **kwargs)
        except TypeError as error:
            raise ArgumentCountError(f"{function.__name__}: {error}") from None
        return function(*args, **kwargs)

    return wrapper


def broadcast_parameters(
    *values: Any, size: Sequence[Any] = (), name: str
) -> Broadcast:
    r"""Validate ``values`` and bring them to a common shape and dtype.

    Parameters
    ----------
    *values : Any
        Tensors, NumPy arrays, Python sequences or Python numbers.
    size : Sequence
        Trailing size arguments of a random generator.
    name : str
        Function name used in error messages.

    Returns
    -------
    Broadcast
        The expanded parameters together with the output shape, dtype and
        device.

    Raises
    ------
    ComplexInputError
        If any value is complex, checked before anything else.
    ShapeMismatchError
        If non-scalar values do not share one shape.
    InvalidDimensionsError
        If ``size`` is not a valid size specification.
    """
    tensors = [torch.as_tensor(value) for value in values]

    if any(tensor.is_complex() for tensor in tensors):
        raise ComplexInputError(f"{name}: inputs must not be complex.")

    shape = resolve_shape(*tensors, size=size, name=name)

    dtype = result_precision(*values).dtype

    device = None
    for value in values:
        if isinstance(value, Tensor):
            device = value.device
            break

    parameters = tuple(
        torch.as_tensor(value, dtype=dtype, device=device).expand(shape)
        for value in values
    )

    return Broadcast(parameters, shape, dtype, device)


def evaluate_piecewise(
    pieces: Sequence[Piece], *values: Any, name: str
) -> Tensor:
    r"""Evaluate a piecewise-defined function element-wise.

    The output starts as NaN everywhere. Pieces are applied in order; each
    formula is evaluated only on the elements selected by its own condition
    and scattered into the output, overwriting earlier pieces. Elements no
    piece selects stay NaN.

    Parameters
    ----------
    pieces : Sequence[Piece]
        Domain classes in priority order, lowest first.
    *values : Any
        Parameters of the function, scalars or tensors of a common shape.
    name : str
        Function name used in error messages.

    Returns
    -------
    Tensor
        Values of the common shape in the result precision.

    Examples
    --------
    >>> pieces = [
    ...     Piece(lambda x: x >= 0, lambda x: torch.sqrt(x)),
    ...     Piece(lambda x: torch.isinf(x), 0.0),
    ... ]
    >>> evaluate_piecewise(pieces, torch.tensor([-1.0, 4.0, math.inf]), name="f")
    tensor([nan, 2., 0.])
    """
    broadcast = broadcast_parameters(*values, name=name)
    output = broadcast.new_output()

    for piece in pieces:
        mask = piece.condition(*broadcast.parameters)
        if not bool(mask.any()):
            continue

        if callable(piece.value):
            selected = [parameter[mask] for parameter in broadcast.parameters]
            output[mask] = piece.value(*selected).to(output.dtype)
        else:
            output[mask] = piece.value

    return output


def sample_piecewise(
    valid: Callable[..., Tensor],
    draw: Callable[..., Tensor],
    *values: Any,
    size: Sequence[Any] = (),
    name: str,
) -> Tensor:
    r"""Draw one random variate per element with valid parameters.

    Parameters
    ----------
    valid : Callable[..., Tensor]
        Maps the broadcast parameters to a mask of valid elements.
    draw : Callable[..., Tensor]
        Receives the gathered valid parameters as 1-D tensors and returns one
        variate per element.
    *values : Any
        Distribution parameters.
    size : Sequence
        Trailing size arguments, see :func:`resolve_size`.
    name : str
        Function name used in error messages.

    Returns
    -------
    Tensor
        Variates of the common shape; NaN where parameters are invalid.
    """
    broadcast = broadcast_parameters(*values, size=size, name=name)
    output = broadcast.new_output()

    mask = valid(*broadcast.parameters)
    if bool(mask.any()):
        selected = [parameter[mask] for parameter in broadcast.parameters]
        output[mask] = draw(*selected).to(output.dtype)

    return output
