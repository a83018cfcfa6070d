"""Player and pursuer entities.

Both variants share a continuous position, a grid direction and a speed.
``Player`` additionally buffers the next requested direction; ``Pursuer``
keeps the last path it computed so renderers can draw it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Tuple

from .maze import EntityKind, MazeGrid, Tile


class Direction(Enum):
    """Unit step on the tile grid, or stillness."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    NONE = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def toward(cls, origin: Tile, target: Tile) -> "Direction":
        """Direction of the single-axis step from ``origin`` to ``target``."""
        dx = (target[0] > origin[0]) - (target[0] < origin[0])
        dy = (target[1] > origin[1]) - (target[1] < origin[1])
        return cls((dx, dy))


@dataclass
class Entity:
    x: float
    y: float
    direction: Direction = Direction.LEFT
    speed: float = 0.0

    kind: ClassVar[EntityKind]

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def tile(self, grid: MazeGrid) -> Tile:
        return grid.tile_of_position(self.position)


@dataclass
class Player(Entity):
    """The player-controlled agent. Cannot pass through doors."""

    next_direction: Direction = Direction.LEFT
    lives: int = 3

    kind = EntityKind.PLAYER


@dataclass
class Pursuer(Entity):
    """An autonomous chaser that re-plans a path at every tile centre."""

    name: str = ""
    color: str = "#ffffff"
    path: List[Tile] = field(default_factory=list)

    kind = EntityKind.PURSUER


@dataclass(frozen=True)
class PursuerSpawn:
    name: str
    color: str
    tile: Tile


PLAYER_SPAWN: Tile = (13, 23)

DEFAULT_PURSUERS: Tuple[PursuerSpawn, ...] = (
    PursuerSpawn("Blinky", "#ff0000", (13, 11)),
    PursuerSpawn("Pinky", "#ffb8ff", (13, 14)),
    PursuerSpawn("Inky", "#00ffff", (12, 14)),
    PursuerSpawn("Clyde", "#ffb852", (15, 14)),
)


def spawn_player(grid: MazeGrid, *, speed: float, lives: int, tile: Tile = PLAYER_SPAWN) -> Player:
    x, y = grid.center_of_tile(tile)
    return Player(
        x=x,
        y=y,
        direction=Direction.LEFT,
        speed=speed,
        next_direction=Direction.LEFT,
        lives=lives,
    )


def spawn_pursuer(grid: MazeGrid, spawn: PursuerSpawn, *, speed: float) -> Pursuer:
    x, y = grid.center_of_tile(spawn.tile)
    return Pursuer(
        x=x,
        y=y,
        direction=Direction.LEFT,
        speed=speed,
        name=spawn.name,
        color=spawn.color,
    )
