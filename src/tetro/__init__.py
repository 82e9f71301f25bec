"""Falling-block puzzle engine."""

from .board import Board
from .collision import hits_solid, in_bounds
from .game_state import GameState, Snapshot
from .piece import Piece, Position, occupied_cells, rotate_clockwise
from .shapes import PALETTE, SHAPES, make_shape, palette, random_shape
from .utils import clamp, render_grid

__all__ = [
    "Board",
    "GameState",
    "Snapshot",
    "Piece",
    "Position",
    "PALETTE",
    "SHAPES",
    "clamp",
    "hits_solid",
    "in_bounds",
    "make_shape",
    "occupied_cells",
    "palette",
    "random_shape",
    "render_grid",
    "rotate_clockwise",
]
