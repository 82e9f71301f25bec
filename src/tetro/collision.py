"""Pure collision checks for a shape placed on a board.

Neither check mutates its arguments.  Both look only at the occupied cells of
the shape; empty cells may hang off the board freely.
"""

from __future__ import annotations

from .board import Board
from .piece import Position, occupied_cells
from .shapes import Shape
from .utils import clamp


def in_bounds(board: Board, shape: Shape, position: Position) -> bool:
    """Return ``True`` if every occupied cell sits within the board's columns.

    Rows are not checked: a piece may poke above the top or below the floor
    while it is being evaluated.
    """

    return all(0 <= col < board.width for _, col, _ in occupied_cells(shape, position))


def hits_solid(board: Board, shape: Shape, position: Position) -> bool:
    """Return ``True`` if an occupied cell meets the floor or a locked cell.

    The floor is the row just below the board.  Otherwise each cell is clamped
    onto the board before looking it up, so cells beside or above the
    playfield are tested against the nearest edge cell.
    """

    for row, col, _ in occupied_cells(shape, position):
        if row == board.height:
            return True
        fix_row = clamp(0, row, board.height - 1)
        fix_col = clamp(0, col, board.width - 1)
        if board.grid[fix_row, fix_col] > 0:
            return True
    return False
