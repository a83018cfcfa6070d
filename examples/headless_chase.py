"""
Headless Chase

Runs the game without a window, steering the player with a scripted route
and reporting pursuer distance each second via a tick listener.

Run: python examples/headless_chase.py --ticks 600
"""

import argparse
import asyncio

from mazechase import (
    Command,
    FrameClock,
    GameLoop,
    InputSource,
    Simulation,
    new_game,
)
from mazechase.logging_utils import log_info

# Route through the lower half of the maze: (tick, command)
ROUTE = [
    (1, Command.LEFT),
    (120, Command.UP),
    (240, Command.RIGHT),
    (360, Command.DOWN),
]


class ScriptedRoute(InputSource):
    """Emits each route command on its scheduled tick."""

    def __init__(self, route):
        self.route = list(route)
        self.tick = 0

    def poll(self):
        self.tick += 1
        return [command for at, command in self.route if at == self.tick]


class FixedStep:
    """60 Hz time source so runs are reproducible."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        self.now += 1 / 60
        return self.now


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless maze chase")
    parser.add_argument("--ticks", type=int, default=600, help="Number of ticks to simulate")
    return parser.parse_args()


async def main(args: argparse.Namespace) -> None:
    simulation = Simulation(new_game())
    grid = simulation.state.grid

    def report(tick, frame):
        if tick % 60:
            return
        px, py = grid.tile_of_position((frame.player.x, frame.player.y))
        closest = min(
            abs(px - gx) + abs(py - gy)
            for gx, gy in (grid.tile_of_position((g.x, g.y)) for g in frame.pursuers)
        )
        log_info(f"t={tick // 60}s score={frame.score} nearest pursuer {closest} tiles away")

    loop = GameLoop(
        simulation,
        input_sources=[ScriptedRoute(ROUTE)],
        tick_listeners=[report],
        clock=FrameClock(FixedStep()),
        fps=0,
    )
    await loop.run(num_ticks=args.ticks)


if __name__ == "__main__":
    asyncio.run(main(parse_args()))
