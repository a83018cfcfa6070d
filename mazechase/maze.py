"""Static maze definition and tile queries.

The maze is an immutable grid of single-character symbols. Entities live in
continuous pixel space; every query here converts between that space and the
discrete ``(col, row)`` tiles the grid is made of. Pellet *presence* is not
stored here (see ``collectibles.py``), so the grid never changes after load.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

Tile = Tuple[int, int]
Position = Tuple[float, float]

TILE_SIZE = 16

DEFAULT_LAYOUT: Tuple[str, ...] = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.#####.##.#####.######",
    "     #.#####.##.#####.#     ",
    "     #.##..........##.#     ",
    "     #.##.###==###.##.#     ",
    "######.##.#      #.##.######",
    "      .   #      #   .      ",
    "      .   #      #   .      ",
    "######.##.#      #.##.######",
    "     #.##.########.##.#     ",
    "     #.##..........##.#     ",
    "     #.##.########.##.#     ",
    "######.##.########.##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##................##..o#",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)


class TileKind(str, Enum):
    """Classification of a single maze tile."""

    WALL = "wall"
    DOOR = "door"
    FLOOR = "floor"
    PELLET = "pellet"
    POWER_PELLET = "power_pellet"


class EntityKind(str, Enum):
    """Which passability rules apply to an entity."""

    PLAYER = "player"
    PURSUER = "pursuer"


SYMBOLS: Dict[str, TileKind] = {
    "#": TileKind.WALL,
    "=": TileKind.DOOR,
    ".": TileKind.PELLET,
    "o": TileKind.POWER_PELLET,
    " ": TileKind.FLOOR,
}


class MazeLayoutError(ValueError):
    """Raised when a maze layout is ragged or contains unknown symbols."""


@dataclass(frozen=True)
class MazeGrid:
    """Immutable tile grid with passability and coordinate helpers."""

    rows: Tuple[str, ...]
    tile_size: int = TILE_SIZE

    @classmethod
    def from_rows(cls, rows: Sequence[str], tile_size: int = TILE_SIZE) -> "MazeGrid":
        """Validate ``rows`` and build a grid.

        Raises:
            MazeLayoutError: If the layout is empty, ragged, or uses a symbol
                outside ``SYMBOLS``.
        """
        rows = tuple(rows)
        if not rows or not rows[0]:
            raise MazeLayoutError("Maze layout must contain at least one non-empty row")
        if tile_size <= 0:
            raise MazeLayoutError(f"Tile size must be positive, got {tile_size}")

        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MazeLayoutError(
                    f"Row {y} has width {len(row)}; expected {width}"
                )
            for x, symbol in enumerate(row):
                if symbol not in SYMBOLS:
                    raise MazeLayoutError(
                        f"Unknown maze symbol {symbol!r} at column {x}, row {y}"
                    )
        return cls(rows=rows, tile_size=tile_size)

    @property
    def cols(self) -> int:
        return len(self.rows[0])

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def pixel_width(self) -> int:
        return self.cols * self.tile_size

    @property
    def pixel_height(self) -> int:
        return self.row_count * self.tile_size

    def in_bounds(self, tile: Tile) -> bool:
        x, y = tile
        return 0 <= x < self.cols and 0 <= y < self.row_count

    def kind_at(self, tile: Tile) -> TileKind:
        """Return the tile kind; anything outside the grid counts as floor."""
        if not self.in_bounds(tile):
            return TileKind.FLOOR
        x, y = tile
        return SYMBOLS[self.rows[y][x]]

    def is_wall(self, tile: Tile) -> bool:
        """Walls bound the maze vertically only.

        Columns outside the grid are open so entities can run through the
        side tunnels and wrap around.
        """
        x, y = tile
        if y < 0 or y >= self.row_count:
            return True
        if x < 0 or x >= self.cols:
            return False
        return self.rows[y][x] == "#"

    def is_door(self, tile: Tile) -> bool:
        return self.in_bounds(tile) and self.kind_at(tile) is TileKind.DOOR

    def is_passable(self, tile: Tile, kind: EntityKind) -> bool:
        if self.is_wall(tile):
            return False
        if self.is_door(tile) and kind is EntityKind.PLAYER:
            return False
        return True

    def tile_of_position(self, pos: Position) -> Tile:
        x, y = pos
        return math.floor(x / self.tile_size), math.floor(y / self.tile_size)

    def center_of_tile(self, tile: Tile) -> Position:
        half = self.tile_size / 2
        x, y = tile
        return x * self.tile_size + half, y * self.tile_size + half

    def tiles_of_kind(self, kind: TileKind) -> List[Tile]:
        """All in-bounds tiles of ``kind`` in row-major order."""
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, symbol in enumerate(row)
            if SYMBOLS[symbol] is kind
        ]

    def iter_tiles(self) -> Iterable[Tuple[Tile, TileKind]]:
        for y, row in enumerate(self.rows):
            for x, symbol in enumerate(row):
                yield (x, y), SYMBOLS[symbol]


def default_maze() -> MazeGrid:
    """Return the standard 28x31 maze."""
    return MazeGrid.from_rows(DEFAULT_LAYOUT)
