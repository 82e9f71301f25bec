"""Shape catalog and colour palette.

Shapes are small numpy matrices indexed ``[row, col]``.  A value of ``0`` is
an empty cell and any other value is an index into :data:`PALETTE`.  Every
shape handed out by this module is read-only; rotation always builds a new
matrix (see :func:`tetro.piece.rotate_clockwise`).
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

Shape = NDArray[np.uint8]


# Colour for each cell value.  Index ``0`` is the background.
PALETTE: Tuple[str, ...] = (
    "#002b36",  # 0 background
    "#93a1a1",  # 1 gray
    "#dc322f",  # 2 red
    "#859900",  # 3 green
    "#268bd2",  # 4 blue
    "#b58900",  # 5 yellow
    "#2aa198",  # 6 cyan
    "#6c71c4",  # 7 violet
    "#cb4b16",  # 8 orange
    "#d33682",  # 9 magenta
)


def make_shape(rows: Sequence[Sequence[int]]) -> Shape:
    """Return an immutable shape matrix built from nested ``rows``.

    Raises:
        ValueError: If ``rows`` is not a non-empty rectangle of palette
            indices.
    """

    try:
        matrix = np.array(rows, dtype=np.int64)
    except ValueError as exc:
        raise ValueError("Shape rows must all have the same length") from exc
    if matrix.ndim != 2 or matrix.size == 0:
        raise ValueError("Shape must be a non-empty 2D matrix")
    if np.any(matrix < 0) or np.any(matrix >= len(PALETTE)):
        raise ValueError("Shape values must be palette indices")
    shape = matrix.astype(np.uint8)
    shape.flags.writeable = False
    return shape


_BASE_SHAPES: List[List[List[int]]] = [
    # block
    [[4, 4],
     [4, 4]],
    # L
    [[0, 8, 0, 0],
     [0, 8, 0, 0],
     [0, 8, 0, 0],
     [0, 8, 8, 0]],
    # T
    [[9, 9, 9],
     [0, 9, 0],
     [0, 0, 0]],
    # long
    [[0, 2, 0, 0],
     [0, 2, 0, 0],
     [0, 2, 0, 0],
     [0, 2, 0, 0]],
    # Z
    [[0, 0, 3, 0],
     [0, 3, 3, 0],
     [0, 3, 0, 0],
     [0, 0, 0, 0]],
    # S
    [[0, 6, 0, 0],
     [0, 6, 6, 0],
     [0, 0, 6, 0],
     [0, 0, 0, 0]],
]

SHAPES: Tuple[Shape, ...] = tuple(make_shape(rows) for rows in _BASE_SHAPES)


def random_shape(rng: Optional[random.Random] = None) -> Shape:
    """Return a uniformly chosen shape from :data:`SHAPES`."""

    chooser = rng if rng is not None else random
    return SHAPES[chooser.randrange(len(SHAPES))]


def palette() -> Tuple[str, ...]:
    """Return the fixed colour table, background first."""

    return PALETTE
