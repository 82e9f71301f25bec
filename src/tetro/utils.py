"""Utility helpers for the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .piece import Piece


def clamp(minimum: int, value: int, maximum: int) -> int:
    """Limit ``value`` to the inclusive range ``[minimum, maximum]``."""

    return min(max(value, minimum), maximum)


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece).  Cells of the piece that fall outside the board are skipped.
    """

    grid = board.grid.tolist()
    if active is not None:
        for r, c, value in active.cells():
            if 0 <= r < board.height and 0 <= c < board.width:
                grid[r][c] = value
    return grid
