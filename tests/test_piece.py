import numpy as np
import pytest

from tetro.piece import Piece, Position, occupied_cells, rotate_clockwise
from tetro.shapes import SHAPES, make_shape


@pytest.mark.parametrize("shape", SHAPES)
def test_four_rotations_restore_square_shape(shape):
    turned = shape
    for _ in range(4):
        turned = rotate_clockwise(turned)
    assert np.array_equal(turned, shape)


def test_rotate_t_shape_clockwise():
    t_shape = SHAPES[2]
    assert rotate_clockwise(t_shape).tolist() == [
        [0, 0, 9],
        [0, 9, 9],
        [0, 0, 9],
    ]


def test_rotation_builds_new_read_only_matrix():
    shape = SHAPES[1]
    before = shape.copy()
    turned = rotate_clockwise(shape)
    assert turned is not shape
    assert np.array_equal(shape, before)
    with pytest.raises(ValueError):
        turned[0, 0] = 1


def test_rotate_non_square_shape():
    shape = make_shape([[1, 2, 3], [4, 5, 6]])
    turned = rotate_clockwise(shape)
    assert turned.tolist() == [[4, 1], [5, 2], [6, 3]]
    for _ in range(3):
        turned = rotate_clockwise(turned)
    assert np.array_equal(turned, shape)


def test_occupied_cells_are_absolute_and_skip_empty():
    cells = list(occupied_cells(SHAPES[0], Position(2, 3)))
    assert cells == [(2, 3, 4), (2, 4, 4), (3, 3, 4), (3, 4, 4)]


def test_occupied_cells_is_lazy():
    cells = occupied_cells(SHAPES[1], Position(0, 0))
    assert next(cells) == (0, 1, 8)


def test_piece_transforms_return_new_pieces():
    piece = Piece(SHAPES[2], Position(5, 4))
    moved = piece.moved(1, -1)
    assert moved.position == Position(6, 3)
    assert piece.position == Position(5, 4)

    turned = piece.rotated()
    assert turned.position == piece.position
    assert np.array_equal(turned.shape, rotate_clockwise(piece.shape))
    assert piece.shape is SHAPES[2]
