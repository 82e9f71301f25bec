"""The falling piece and the pure transforms applied to it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

import numpy as np

from .shapes import Shape


class Position(NamedTuple):
    """Grid coordinate of a shape's local ``(0, 0)`` cell.

    Either component may lie outside the board; only the collision checks
    decide whether a position is usable.
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)


def rotate_clockwise(shape: Shape) -> Shape:
    """Return a new matrix holding ``shape`` turned 90 degrees clockwise.

    The cell at local ``(row, col)`` moves to ``(col, height - 1 - row)``.
    Non-square shapes swap their dimensions.  ``shape`` itself is untouched.
    """

    rotated = np.ascontiguousarray(np.rot90(shape, k=-1))
    rotated.flags.writeable = False
    return rotated


def occupied_cells(shape: Shape, position: Position) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(row, col, value)`` for every non-empty cell of ``shape``.

    Coordinates are absolute, i.e. relative to the board.  Cells are produced
    lazily in row-major order so callers may stop early with ``any``/``next``.
    """

    rows, cols = np.nonzero(shape)
    for r, c in zip(rows.tolist(), cols.tolist()):
        yield position.row + r, position.col + c, int(shape[r, c])


@dataclass(frozen=True, eq=False)
class Piece:
    """Active falling piece: a shape paired with its position."""

    shape: Shape
    position: Position

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Return the absolute occupied cells of this piece."""

        return occupied_cells(self.shape, self.position)

    def moved(self, d_row: int, d_col: int) -> "Piece":
        """Return a copy translated by ``d_row`` rows and ``d_col`` columns."""

        return Piece(self.shape, self.position.offset(d_row, d_col))

    def rotated(self) -> "Piece":
        """Return a copy turned clockwise about the unchanged position."""

        return Piece(rotate_clockwise(self.shape), self.position)
