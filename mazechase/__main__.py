"""
Command-line entry point.

Run: python -m mazechase            (pygame window, arrow keys + P to pause)
     python -m mazechase --ascii --ticks 600 --every 60
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from typing import List, Optional

from .config import Config
from .game_loop import GameLoop
from .logging_utils import log_error, log_info
from .renderers import AsciiRenderer
from .simulation import Simulation, new_game


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maze chase arcade game")
    parser.add_argument("--ascii", action="store_true", help="Render to the terminal instead of a window")
    parser.add_argument("--ticks", type=int, default=None, help="Stop after N ticks (default: run until quit)")
    parser.add_argument("--every", type=int, default=30, help="ASCII mode: print one frame every N ticks")
    parser.add_argument("--fps", type=float, default=None, help="Target frame rate (0 = unthrottled)")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print per-tick pursuit and pellet events",
    )
    return parser.parse_args(argv)


async def main(args: argparse.Namespace) -> int:
    if args.debug:
        os.environ["MAZECHASE_VERBOSE"] = "1"

    try:
        Config.validate()
    except ValueError as e:
        log_error(str(e))
        return 1
    log_info(Config.display())

    simulation = Simulation(new_game())
    grid = simulation.state.grid

    if args.ascii:
        loop = GameLoop(
            simulation,
            renderers=[AsciiRenderer(grid, every=args.every)],
            fps=args.fps,
        )
    else:
        # Imported lazily so --ascii works without a display or pygame.
        from .pygame_frontend import PygameFrontend, RenderSurfaceUnavailableError

        try:
            frontend = PygameFrontend(grid)
        except RenderSurfaceUnavailableError as e:
            log_error(str(e))
            return 1
        loop = GameLoop(
            simulation,
            renderers=[frontend],
            input_sources=[frontend],
            fps=args.fps,
        )

    await loop.run(num_ticks=args.ticks)
    return 0


def cli() -> None:
    sys.exit(asyncio.run(main(parse_args())))


if __name__ == "__main__":
    cli()
