"""Command line entry point.

Run with: `python -m tetro`

By default this plays a number of gravity ticks with no player input and
prints the resulting frame as ASCII, a quick smoke test of the engine.  Pass
``--pygame`` to open a playable window instead.
"""

from __future__ import annotations

import argparse
import logging
import random
from time import sleep

from . import GameState, render_grid
from .board import HEIGHT, WIDTH

LOGGER = logging.getLogger(__name__)


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join(str(cell) if cell else "." for cell in row))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tetro", description=__doc__)
    parser.add_argument("--width", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument("--ticks", type=int, default=200, help="Gravity ticks to simulate.")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between printed frames (0 prints only the last frame).",
    )
    parser.add_argument(
        "--lock-value",
        type=int,
        default=None,
        help="Palette index for locked cells (default keeps each piece's colour).",
    )
    parser.add_argument("--pygame", action="store_true", help="Open a pygame window.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s"
    )

    gs = GameState(
        width=args.width,
        height=args.height,
        rng=random.Random(args.seed),
        lock_value=args.lock_value,
    )
    if args.pygame:
        from .run_pygame import main as run_window

        run_window(gs)
        return

    for _ in range(args.ticks):
        gs.tick()
        if args.delay > 0:
            _print_grid(render_grid(gs.board, gs.active))
            print()
            sleep(args.delay)
    LOGGER.debug("Simulated %d tick(s)", args.ticks)
    _print_grid(render_grid(gs.board, gs.active))


if __name__ == "__main__":
    main()
