import pytest

from tetro.board import HEIGHT, WIDTH, Board
from tetro.piece import Piece, Position
from tetro.shapes import SHAPES

BLOCK = SHAPES[0]
L_SHAPE = SHAPES[1]


def test_new_board_is_empty_and_fully_dirty():
    board = Board()
    assert board.grid.shape == (HEIGHT, WIDTH)
    assert not board.grid.any()
    assert board.dirty.all()


def test_non_positive_dimensions_rejected():
    with pytest.raises(ValueError):
        Board(0, 5)
    with pytest.raises(ValueError):
        Board(5, -1)


def test_out_of_range_access_raises():
    board = Board(4, 3)
    with pytest.raises(IndexError):
        board.get_cell(3, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, 1)
    with pytest.raises(IndexError):
        board.mark_dirty(0, 4)
    with pytest.raises(IndexError):
        board.is_dirty(-1, 0)


def test_set_cell_rejects_values_outside_palette():
    board = Board()
    with pytest.raises(ValueError):
        board.set_cell(0, 0, 10)


def test_all_cells_visits_in_row_major_order():
    board = Board(3, 2)
    seen = []
    board.all_cells(lambda row, col: seen.append((row, col)))
    assert seen == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_all_rows_visits_top_to_bottom():
    board = Board(2, 4)
    seen = []
    board.all_rows(seen.append)
    assert seen == [0, 1, 2, 3]


def test_lock_keeps_piece_colour():
    board = Board()
    board.lock(Piece(BLOCK, Position(HEIGHT - 2, 0)))
    for row, col in [(HEIGHT - 2, 0), (HEIGHT - 2, 1), (HEIGHT - 1, 0), (HEIGHT - 1, 1)]:
        assert board.get_cell(row, col) == 4
    assert int((board.grid != 0).sum()) == 4


def test_lock_with_fixed_value_flattens_colour():
    board = Board()
    board.lock(Piece(L_SHAPE, Position(0, 0)), value=1)
    for row, col in [(0, 1), (1, 1), (2, 1), (3, 1), (3, 2)]:
        assert board.get_cell(row, col) == 1


def test_lock_does_not_blank_existing_cells():
    board = Board()
    board.set_cell(0, 0, 5)
    board.lock(Piece(L_SHAPE, Position(0, 0)))
    assert board.get_cell(0, 0) == 5
    assert board.get_cell(0, 1) == 8


def test_lock_outside_board_raises_and_leaves_grid_untouched():
    board = Board()
    with pytest.raises(IndexError):
        board.lock(Piece(BLOCK, Position(HEIGHT - 1, 0)))
    assert not board.grid.any()


def test_lock_leaves_dirty_flags_alone():
    board = Board()
    board.consume_dirty()
    board.lock(Piece(BLOCK, Position(5, 5)))
    assert not board.dirty.any()


def test_clear_single_completed_row_shifts_rows_down():
    board = Board(4, 5)
    board.grid[1] = [1, 0, 0, 2]
    board.grid[2] = [3, 3, 3, 3]
    board.grid[3] = [0, 5, 0, 0]
    board.grid[4] = [6, 6, 0, 6]
    board.consume_dirty()

    cleared = board.clear_completed_rows()

    assert cleared == 1
    assert board.grid.tolist() == [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [1, 0, 0, 2],
        [0, 5, 0, 0],
        [6, 6, 0, 6],
    ]
    assert board.dirty.all()


def test_clear_separated_rows_in_one_pass():
    board = Board(3, 4)
    board.grid[0] = [1, 1, 1]
    board.grid[1] = [0, 2, 0]
    board.grid[2] = [3, 3, 3]
    board.grid[3] = [0, 0, 4]

    assert board.clear_completed_rows() == 2
    assert board.grid.tolist() == [[0, 0, 0], [0, 0, 0], [0, 2, 0], [0, 0, 4]]


def test_no_completed_rows_keeps_dirty_map_clean():
    board = Board()
    board.grid[HEIGHT - 1, :-1] = 7
    board.consume_dirty()
    assert board.clear_completed_rows() == 0
    assert not board.dirty.any()


def test_dirty_accessors():
    board = Board()
    board.consume_dirty()
    board.mark_dirty(3, 4)
    assert board.is_dirty(3, 4)
    assert not board.is_dirty(3, 5)
    board.clear_dirty_at(3, 4)
    assert not board.is_dirty(3, 4)


def test_consuming_dirty_map_twice_yields_clean_map():
    board = Board()
    first = board.consume_dirty()
    second = board.consume_dirty()
    assert first.all()
    assert not second.any()


def test_reset_empties_grid_and_marks_everything_dirty():
    board = Board()
    board.set_cell(4, 4, 2)
    board.consume_dirty()
    board.reset()
    assert not board.grid.any()
    assert board.dirty.all()
