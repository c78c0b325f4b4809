# tests/torchstatistics/probability/test__shape.py
import numpy
import pytest
import torch

from torchstatistics.probability import (
    InvalidDimensionsError,
    ShapeMismatchError,
)
from torchstatistics.probability._shape import resolve_shape, resolve_size


class TestResolveSize:
    """Tests for size specifications of random generators."""

    def test_no_arguments(self):
        assert resolve_size((), name="f") is None

    def test_single_integer_is_square(self):
        assert resolve_size((3,), name="f") == (3, 3)

    def test_zero_is_empty_square(self):
        assert resolve_size((0,), name="f") == (0, 0)

    @pytest.mark.parametrize(
        "dims", [[4, 1], (4, 1), torch.Size([4, 1]), torch.tensor([4, 1])]
    )
    def test_vector(self, dims):
        assert resolve_size((dims,), name="f") == (4, 1)

    def test_numpy_vector(self):
        assert resolve_size((numpy.array([2, 3, 4]),), name="f") == (2, 3, 4)

    def test_several_integers(self):
        assert resolve_size((4, 1), name="f") == (4, 1)
        assert resolve_size((2, 3, 4), name="f") == (2, 3, 4)

    def test_integer_tensor_scalar(self):
        assert resolve_size((torch.tensor(2),), name="f") == (2, 2)

    @pytest.mark.parametrize(
        "size",
        [
            (-1,),
            (2.0,),
            (True,),
            ([2, -1, 2],),
            ([2.5, 2],),
            (torch.ones(2, 2, dtype=torch.int64),),
            (numpy.ones((2, 2), dtype=int),),
            (3, -2),
            (3, [2]),
            (3, 2.5),
            ("3",),
        ],
    )
    def test_invalid(self, size):
        with pytest.raises(InvalidDimensionsError, match="f:"):
            resolve_size(size, name="f")


class TestResolveShape:
    """Tests for the common shape of parameters."""

    def test_all_scalar(self):
        assert resolve_shape(torch.tensor(1.0), torch.tensor(2.0), name="f") == ()

    def test_scalars_take_array_shape(self):
        shape = resolve_shape(
            torch.tensor(1.0), torch.ones(2, 3), torch.tensor(2.0), name="f"
        )
        assert shape == (2, 3)

    def test_identical_shapes(self):
        assert resolve_shape(torch.ones(5), torch.ones(5), name="f") == (5,)

    @pytest.mark.parametrize(
        "shapes",
        [
            [(3, 3), (2, 2), (2, 2)],
            [(2, 2), (3, 3), (2, 2)],
            [(2, 2), (2, 2), (3, 3)],
        ],
    )
    def test_mismatch_in_any_position(self, shapes):
        values = [torch.ones(s) for s in shapes]
        with pytest.raises(ShapeMismatchError):
            resolve_shape(*values, name="f")

    def test_no_size_one_broadcasting(self):
        """Shapes (3, 1) and (1, 3) are not combined."""
        with pytest.raises(ShapeMismatchError):
            resolve_shape(torch.ones(3, 1), torch.ones(1, 3), name="f")

    def test_size_for_scalars(self):
        shape = resolve_shape(torch.tensor(1.0), size=([2, 5],), name="f")
        assert shape == (2, 5)

    def test_size_matching_parameters(self):
        shape = resolve_shape(torch.ones(3, 2), size=(3, 2), name="f")
        assert shape == (3, 2)

    @pytest.mark.parametrize("size", [(3,), ([3, 2],), (3, 2)])
    def test_size_conflicting_with_parameters(self, size):
        with pytest.raises(ShapeMismatchError):
            resolve_shape(torch.ones(2, 2), size=size, name="f")

    def test_no_values(self):
        assert resolve_shape(size=(2, 3), name="f") == (2, 3)
        assert resolve_shape(name="f") == ()
