"""Remaining pellets and power pellets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

from .maze import MazeGrid, Tile, TileKind

PELLET_POINTS = 10
POWER_PELLET_POINTS = 50


@dataclass
class CollectibleStore:
    """Two disjoint tile sets that only ever shrink.

    Populated once from the grid; ``consume`` removes whatever sits on a tile
    and returns the points earned, so a tile can pay out at most once.
    """

    pellets: Set[Tile] = field(default_factory=set)
    power_pellets: Set[Tile] = field(default_factory=set)

    @classmethod
    def from_grid(cls, grid: MazeGrid) -> "CollectibleStore":
        return cls(
            pellets=set(grid.tiles_of_kind(TileKind.PELLET)),
            power_pellets=set(grid.tiles_of_kind(TileKind.POWER_PELLET)),
        )

    def consume(self, tile: Tile) -> int:
        # Both sets are checked; the grid keeps them disjoint but this does not rely on it.
        points = 0
        if tile in self.pellets:
            self.pellets.discard(tile)
            points += PELLET_POINTS
        if tile in self.power_pellets:
            self.power_pellets.discard(tile)
            points += POWER_PELLET_POINTS
        return points

    @property
    def remaining(self) -> int:
        return len(self.pellets) + len(self.power_pellets)

    @property
    def is_cleared(self) -> bool:
        return self.remaining == 0
