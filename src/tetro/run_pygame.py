"""Simple pygame front-end for the engine.

This module glues :class:`~tetro.game_state.GameState` to ``pygame`` for
rendering and input.  Gravity ticks and key presses are handled on the same
loop, so the game state only ever sees one command at a time.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Callable, Dict

import pygame

from .game_state import GameState

# Size of a single board cell in pixels
CELL_SIZE = 15
# Milliseconds between gravity ticks
TICK_MS = 1000
# Frames per second to run the game loop at
FPS = 60
# Outline drawn around every cell
GRID_COLOR = "#073642"

LOGGER = logging.getLogger(__name__)

KEY_COMMANDS: Dict[int, Callable[[GameState], bool]] = {
    pygame.K_LEFT: GameState.move_left,
    pygame.K_RIGHT: GameState.move_right,
    pygame.K_UP: GameState.rotate,
    pygame.K_DOWN: GameState.move_down,
}


def _cell_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def _paint(screen: pygame.Surface, row: int, col: int, color: str) -> None:
    rect = _cell_rect(row, col)
    pygame.draw.rect(screen, pygame.Color(color), rect)
    pygame.draw.rect(screen, pygame.Color(GRID_COLOR), rect, 1)


def draw_dirty(screen: pygame.Surface, state: GameState) -> int:
    """Repaint dirty board cells, then the active piece.

    Only cells flagged dirty are redrawn from the board; their flags are
    consumed.  The active piece is painted on top every call.  Returns the
    number of board cells repainted.
    """

    board = state.board
    dirty = state.consume_dirty()
    painted = 0
    for row, col in zip(*dirty.nonzero()):
        _paint(screen, int(row), int(col), state.palette[board.grid[row, col]])
        painted += 1

    if state.active is not None:
        for row, col, value in state.active.cells():
            if 0 <= row < board.height and 0 <= col < board.width:
                _paint(screen, row, col, state.palette[value])
    return painted


def handle_key(event: pygame.event.Event, state: GameState) -> bool:
    """Dispatch an arrow key press to the matching command.

    Returns ``False`` for keys that have no command.
    """

    command = KEY_COMMANDS.get(event.key)
    if command is None:
        return False
    command(state)
    return True


class GameRunner:
    """Manage the game loop with start/stop controls."""

    def __init__(self, state: GameState | None = None, *, tick_ms: int = TICK_MS) -> None:
        self._running = False
        self._task: asyncio.Task | None = None
        self._screen: pygame.Surface | None = None
        self._state = state
        self._clock: pygame.time.Clock | None = None
        self._tick_ms = tick_ms
        self._tick_timer = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> GameState | None:
        return self._state

    def advance(self, dt: int) -> int:
        """Accumulate ``dt`` milliseconds and run any gravity ticks now due.

        Returns the number of ticks applied.
        """

        if self._state is None:
            return 0
        self._tick_timer += dt
        ticks = 0
        while self._tick_timer >= self._tick_ms:
            self._tick_timer -= self._tick_ms
            self._state.tick()
            ticks += 1
        return ticks

    async def _run_loop(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        if self._state is None:
            self._state = GameState()
        board = self._state.board
        self._screen = pygame.display.set_mode(
            (board.width * CELL_SIZE, board.height * CELL_SIZE)
        )
        pygame.display.set_caption("Tetro")
        self._clock = pygame.time.Clock()
        board.mark_all_dirty()
        LOGGER.info("Game started")

        self._tick_timer = 0
        self._running = True
        while self._running:
            dt = self._clock.tick(FPS) if self._clock else 0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, self._state)

            self.advance(dt)

            if self._screen:
                draw_dirty(self._screen, self._state)
                pygame.display.flip()

            # Yield to the host event loop to keep the UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.warning("Game already running")
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (e.g., plain Python); run synchronously
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())

    async def stop_async(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._task:
            await self._task

    def stop(self) -> None:
        if not self._running:
            LOGGER.debug("Stop ignored: game not running")
            return
        # The loop notices the flag on its next frame
        self._running = False


def main(state: GameState | None = None) -> None:
    """Open a window and play until it is closed."""

    GameRunner(state).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
