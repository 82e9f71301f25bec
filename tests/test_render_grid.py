from tetro.game_state import GameState
from tetro.piece import Piece, Position
from tetro.shapes import PALETTE, SHAPES
from tetro.utils import clamp, render_grid


def test_clamp():
    assert clamp(0, -3, 9) == 0
    assert clamp(0, 12, 9) == 9
    assert clamp(0, 4, 9) == 4


def test_render_grid_overlays_piece_without_locking(fixed_rng):
    gs = GameState(rng=fixed_rng(0))
    grid = render_grid(gs.board, gs.active)
    assert grid[0][4] == 4
    assert grid[1][5] == 4
    assert gs.board.get_cell(0, 4) == 0


def test_render_grid_skips_cells_off_board(fixed_rng):
    gs = GameState(rng=fixed_rng(0))
    grid = render_grid(gs.board, Piece(SHAPES[0], Position(-1, 0)))
    assert grid[0][:3] == [4, 4, 0]
    assert sum(value != 0 for row in grid for value in row) == 2


def test_snapshot_is_a_copy(fixed_rng):
    gs = GameState(rng=fixed_rng(0))
    snap = gs.snapshot()
    snap.grid[0, 0] = 9
    snap.dirty[0, 0] = False
    assert gs.board.get_cell(0, 0) == 0
    assert gs.board.is_dirty(0, 0)
    assert snap.active is gs.active
    assert snap.palette == PALETTE
