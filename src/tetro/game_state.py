"""High level game state and the commands that drive it.

A :class:`GameState` owns the board and the single falling piece.  Every
command runs to completion before returning; callers (the ticker and the input
handler) must never call into the same instance concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple
import logging
import random

from .board import HEIGHT, WIDTH, Board, DirtyMap, Grid
from .collision import hits_solid, in_bounds
from .piece import Piece, Position, occupied_cells
from .shapes import PALETTE, SHAPES, Shape, random_shape


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only copy of everything a renderer needs."""

    grid: Grid
    dirty: DirtyMap
    active: Optional[Piece]
    palette: Tuple[str, ...]


def spawn_position(board: Board, shape: Shape) -> Position:
    """Return the top-centre position at which ``shape`` enters ``board``."""

    return Position(0, board.width // 2 - shape.shape[1] // 2)


@dataclass
class GameState:
    """Mutable state for a game session.

    ``lock_value`` selects the value written for locked cells: ``None`` keeps
    each piece's colour, an integer paints every locked cell with that palette
    entry.  ``on_redraw`` is called with the game after each visible change.
    """

    width: int = WIDTH
    height: int = HEIGHT
    rng: random.Random = field(default_factory=random.Random)
    lock_value: Optional[int] = None
    on_redraw: Optional[Callable[["GameState"], None]] = None
    board: Board = field(init=False)
    active: Optional[Piece] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.lock_value is not None and not 0 < self.lock_value < len(PALETTE):
            raise ValueError(f"Lock value {self.lock_value} outside palette")
        self.board = Board(self.width, self.height)
        for shape in SHAPES:
            position = spawn_position(self.board, shape)
            if not in_bounds(self.board, shape, position) or any(
                row >= self.height for row, _, _ in occupied_cells(shape, position)
            ):
                raise ValueError(
                    f"Board {self.width}x{self.height} too small to spawn every shape"
                )
        self.spawn_next()

    # Queries -----------------------------------------------------------
    @property
    def palette(self) -> Tuple[str, ...]:
        return PALETTE

    def snapshot(self) -> Snapshot:
        """Return copies of the grid and dirty map plus the live piece."""

        return Snapshot(
            grid=self.board.grid.copy(),
            dirty=self.board.dirty.copy(),
            active=self.active,
            palette=PALETTE,
        )

    def consume_dirty(self) -> DirtyMap:
        """Return the dirty map and clear it, for renderers."""

        return self.board.consume_dirty()

    # Internal helpers --------------------------------------------------
    def _mark_piece_dirty(self, piece: Optional[Piece]) -> None:
        if piece is None:
            return
        for row, col, _ in piece.cells():
            if 0 <= row < self.board.height and 0 <= col < self.board.width:
                self.board.mark_dirty(row, col)

    def _request_redraw(self) -> None:
        if self.on_redraw is not None:
            self.on_redraw(self)

    def _lock_and_continue(self, piece: Piece) -> None:
        """Lock ``piece``, clear completed rows and spawn the next piece."""

        self.board.lock(piece, self.lock_value)
        self.active = None
        LOGGER.debug("Locked piece at %s", piece.position)
        cleared = self.board.clear_completed_rows()
        if cleared:
            LOGGER.info("Cleared %d row(s)", cleared)
        self.spawn_next()

    # Commands ----------------------------------------------------------
    def spawn_next(self) -> Piece:
        """Spawn and return a new active piece.

        If the new piece collides where it appears the game is over: the board
        is emptied and the same piece becomes active on the fresh board.
        """

        shape = random_shape(self.rng)
        position = spawn_position(self.board, shape)
        if hits_solid(self.board, shape, position):
            LOGGER.info("Game over. Resetting.")
            self.board.reset()
        self.active = Piece(shape, position)
        self._mark_piece_dirty(self.active)
        return self.active

    def reset(self) -> None:
        """Reset the entire game state for a new game."""

        self.board.reset()
        self.active = None
        self.spawn_next()
        self._request_redraw()

    def move(self, d_row: int, d_col: int) -> bool:
        """Translate the active piece, locking it if a downward move is blocked.

        Returns ``True`` if the piece moved.  A blocked sideways move leaves
        the piece where it was; a blocked downward move locks it into the
        board, clears rows and spawns the next piece.
        """

        piece = self.active
        if piece is None:
            LOGGER.debug("Move ignored: no active piece")
            return False

        self._mark_piece_dirty(piece)
        target = piece.moved(d_row, d_col)
        hit = hits_solid(self.board, target.shape, target.position)

        if d_row > 0 and hit:
            self._lock_and_continue(piece)
            self._request_redraw()
            return False

        if not hit and in_bounds(self.board, target.shape, target.position):
            self.active = target
        self._mark_piece_dirty(self.active)
        self._request_redraw()
        return self.active is target

    def rotate(self) -> bool:
        """Turn the active piece clockwise if it fits where it stands.

        A rejected rotation changes nothing, dirty flags included.
        """

        piece = self.active
        if piece is None:
            LOGGER.debug("Rotate ignored: no active piece")
            return False

        turned = piece.rotated()
        if not in_bounds(self.board, turned.shape, turned.position) or hits_solid(
            self.board, turned.shape, turned.position
        ):
            LOGGER.debug("Rotation rejected at %s", piece.position)
            return False

        self._mark_piece_dirty(piece)
        self.active = turned
        self._mark_piece_dirty(turned)
        self._request_redraw()
        return True

    def tick(self) -> bool:
        """Apply one step of gravity."""

        return self.move(1, 0)

    def move_left(self) -> bool:
        return self.move(0, -1)

    def move_right(self) -> bool:
        return self.move(0, 1)

    def move_down(self) -> bool:
        return self.move(1, 0)
