"""Collaborator interfaces and text rendering.

The frame loop talks to the outside world through two small interfaces:
``Renderer`` (draws a ``FrameSnapshot``) and ``InputSource`` (reports the
commands pressed since the last poll). ``AsciiRenderer`` is the headless
implementation used by the CLI and in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from .maze import MazeGrid, TileKind
from .schemas import FrameSnapshot
from .simulation import Command


def format_score(score: int) -> str:
    return f"SCORE {score:05d}"


def format_lives(lives: int) -> str:
    return f"LIVES {lives}"


def format_hud(frame: FrameSnapshot) -> str:
    return f"{format_score(frame.score)}  {format_lives(frame.lives)}"


class Renderer(ABC):
    """Draws one frame. Must not mutate the snapshot it receives."""

    @abstractmethod
    def render(self, frame: FrameSnapshot) -> None:
        pass

    def close(self) -> None:
        """Release any window or terminal resources."""


class InputSource(ABC):
    """Reports commands that arrived since the previous poll."""

    @abstractmethod
    def poll(self) -> List[Command]:
        pass

    def close(self) -> None:
        """Release any device resources."""


_DEFAULT_TILE_SYMBOLS: Dict[TileKind, str] = {
    TileKind.WALL: "#",
    TileKind.DOOR: "=",
    TileKind.FLOOR: " ",
    TileKind.PELLET: " ",
    TileKind.POWER_PELLET: " ",
}

PLAYER_SYMBOL = "@"
PATH_SYMBOL = "*"
PELLET_SYMBOL = "."
POWER_PELLET_SYMBOL = "o"


def render_ascii_frame(grid: MazeGrid, frame: FrameSnapshot) -> str:
    """Render the maze, collectibles, entities and HUD as text.

    Pellets come from the snapshot rather than the grid, so eaten pellets
    disappear. Pursuers are drawn with the first letter of their name; while
    paused their paths are overlaid with ``*`` and a banner is appended.
    """
    canvas: List[List[str]] = [
        [_DEFAULT_TILE_SYMBOLS[grid.kind_at((x, y))] for x in range(grid.cols)]
        for y in range(grid.row_count)
    ]

    def plot(tile, symbol: str) -> None:
        if grid.in_bounds(tile):
            x, y = tile
            canvas[y][x] = symbol

    for tile in frame.pellets:
        plot(tile, PELLET_SYMBOL)
    for tile in frame.power_pellets:
        plot(tile, POWER_PELLET_SYMBOL)

    if frame.paused:
        for pursuer in frame.pursuers:
            for tile in pursuer.path:
                plot(tile, PATH_SYMBOL)

    for pursuer in frame.pursuers:
        label = (pursuer.name or "G")[0].upper()
        plot(grid.tile_of_position((pursuer.x, pursuer.y)), label)
    plot(grid.tile_of_position((frame.player.x, frame.player.y)), PLAYER_SYMBOL)

    lines = ["".join(row) for row in canvas]
    lines.append(format_hud(frame))
    if frame.paused:
        lines.append("PAUSED - ghost paths shown as *")
    return "\n".join(lines)


class AsciiRenderer(Renderer):
    """Writes a text frame every ``every`` ticks (and always while paused)."""

    def __init__(
        self,
        grid: MazeGrid,
        *,
        every: int = 1,
        write: Optional[Callable[[str], None]] = None,
    ):
        self.grid = grid
        self.every = max(int(every), 1)
        self.write = write or print
        self._last_paused_tick: Optional[int] = None

    def render(self, frame: FrameSnapshot) -> None:
        if frame.paused:
            # A paused frame does not change; print it once.
            if self._last_paused_tick == frame.tick:
                return
            self._last_paused_tick = frame.tick
        else:
            self._last_paused_tick = None
            if frame.tick % self.every:
                return
        self.write(render_ascii_frame(self.grid, frame))
