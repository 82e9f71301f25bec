"""Board representation for the playfield."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
from numpy.typing import NDArray

from .piece import Piece
from .shapes import PALETTE


# Dimensions of the default playfield.
WIDTH = 10
HEIGHT = 22

Grid = NDArray[np.uint8]
DirtyMap = NDArray[np.bool_]


def create_empty_grid(height: int = HEIGHT, width: int = WIDTH) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


def create_dirty_map(height: int = HEIGHT, width: int = WIDTH) -> DirtyMap:
    """Return a dirty map with every cell flagged for redraw."""

    return np.ones((height, width), dtype=bool)


class Board:
    """Playfield holding the locked cells and their dirty flags.

    ``grid[row, col]`` is ``0`` for an empty cell and a palette index
    otherwise.  Row ``0`` is the top.  ``dirty[row, col]`` is ``True`` when the
    cell may look different from what was last drawn.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(height, width)
        self.dirty: DirtyMap = create_dirty_map(height, width)

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError("Cell out of bounds")

    def reset(self) -> None:
        """Empty every cell and flag the whole board dirty."""

        self.grid = create_empty_grid(self.height, self.width)
        self.dirty = create_dirty_map(self.height, self.width)

    # Iteration ---------------------------------------------------------
    def all_cells(self, visit: Callable[[int, int], object]) -> None:
        """Call ``visit(row, col)`` for every cell in row-major order."""

        for row in range(self.height):
            for col in range(self.width):
                visit(row, col)

    def all_rows(self, visit: Callable[[int], object]) -> None:
        """Call ``visit(row)`` for each row index from top to bottom."""

        for row in range(self.height):
            visit(row)

    # Cells -------------------------------------------------------------
    def get_cell(self, row: int, col: int) -> int:
        """Return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        self._check(row, col)
        return int(self.grid[row, col])

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
            ValueError: If ``value`` is not a palette index.
        """
        self._check(row, col)
        if not 0 <= value < len(PALETTE):
            raise ValueError(f"Cell value {value} outside palette")
        self.grid[row, col] = np.uint8(value)

    def lock(self, piece: Piece, value: Optional[int] = None) -> None:
        """Merge the piece's occupied cells into the grid.

        Each cell keeps the piece's own colour unless ``value`` is given, in
        which case every locked cell is written as ``value``.  Legality of the
        placement is the caller's concern and dirty flags are left alone.

        Raises:
            IndexError: If an occupied cell lies outside the board.
        """

        cells = list(piece.cells())
        if not cells:
            return
        coordinates = np.asarray([(r, c) for r, c, _ in cells], dtype=np.int16)
        rows, cols = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")

        if value is None:
            values = np.asarray([v for _, _, v in cells], dtype=np.uint8)
        else:
            values = np.uint8(value)
        self.grid[rows, cols] = values

    def clear_completed_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Remaining rows keep their order and drop down; fresh empty rows are
        added at the top.  Any clear flags the entire board dirty.
        """

        full_rows = np.all(self.grid != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
            self.mark_all_dirty()
        return cleared

    # Dirty map ---------------------------------------------------------
    def mark_dirty(self, row: int, col: int) -> None:
        self._check(row, col)
        self.dirty[row, col] = True

    def is_dirty(self, row: int, col: int) -> bool:
        self._check(row, col)
        return bool(self.dirty[row, col])

    def clear_dirty_at(self, row: int, col: int) -> None:
        self._check(row, col)
        self.dirty[row, col] = False

    def mark_all_dirty(self) -> None:
        self.dirty[:, :] = True

    def consume_dirty(self) -> DirtyMap:
        """Return a copy of the dirty map and reset every flag to ``False``."""

        snapshot = self.dirty.copy()
        self.dirty[:, :] = False
        return snapshot
