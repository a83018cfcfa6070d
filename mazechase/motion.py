"""Continuous movement constrained to the tile grid.

Direction changes are only evaluated when an entity sits on a tile centre.
Turning mid-tile would let entities cut corners through walls, so every turn
starts from a node of the grid graph.
"""

from __future__ import annotations

import math
from typing import Optional

from .entities import Direction, Entity, Player, Pursuer
from .maze import MazeGrid, Tile
from .pathfinding import shortest_path

ALIGN_EPSILON = 0.5


def _offset_from_center(coord: float, tile_size: int) -> float:
    offset = (coord - tile_size / 2) % tile_size
    return min(offset, tile_size - offset)


def is_tile_aligned(entity: Entity, grid: MazeGrid) -> bool:
    return (
        _offset_from_center(entity.x, grid.tile_size) < ALIGN_EPSILON
        and _offset_from_center(entity.y, grid.tile_size) < ALIGN_EPSILON
    )


def next_tile(entity: Entity, direction: Direction, grid: MazeGrid) -> Tile:
    x, y = entity.tile(grid)
    return x + direction.dx, y + direction.dy


def can_move(entity: Entity, direction: Direction, grid: MazeGrid) -> bool:
    """True if the tile one step away in ``direction`` accepts this entity."""
    return grid.is_passable(next_tile(entity, direction, grid), entity.kind)


def step_intent(entity: Entity, grid: MazeGrid, target: Optional[Tile] = None) -> None:
    """Resolve the entity's direction for this frame.

    Players adopt their buffered direction when it is open and stop when the
    way ahead is blocked. Pursuers re-plan toward ``target`` and face the
    first step of the new path; an empty path keeps the old heading.
    Nothing happens unless the entity is tile-aligned.
    """
    if isinstance(entity, Player):
        if not is_tile_aligned(entity, grid):
            return
        if can_move(entity, entity.next_direction, grid):
            entity.direction = entity.next_direction
        if not can_move(entity, entity.direction, grid):
            entity.direction = Direction.NONE
    elif isinstance(entity, Pursuer):
        if target is None:
            raise ValueError(f"Pursuer {entity.name!r} needs a target tile")
        if not is_tile_aligned(entity, grid):
            return
        current = entity.tile(grid)
        entity.path = shortest_path(grid, current, target, entity.kind)
        if entity.path:
            entity.direction = Direction.toward(current, entity.path[0])
    else:
        raise TypeError(f"Unsupported entity type: {type(entity).__name__}")


def _next_center(coord: float, sign: int, tile_size: int) -> float:
    """Coordinate of the next tile centre strictly ahead of ``coord``."""
    half = tile_size / 2
    index = (coord - half) / tile_size
    if sign > 0:
        return (math.floor(index) + 1) * tile_size + half
    return (math.ceil(index) - 1) * tile_size + half


def _move(entity: Entity, distance: float, grid: MazeGrid) -> float:
    direction = entity.direction
    if direction is Direction.NONE or distance <= 0:
        return 0.0

    horizontal = bool(direction.dx)
    sign = direction.dx if horizontal else direction.dy
    coord = entity.x if horizontal else entity.y
    center = _next_center(coord, sign, grid.tile_size)
    gap = abs(center - coord)

    if distance >= gap:
        # Land exactly on the centre so the next step starts from a grid node.
        coord, leftover = center, distance - gap
    else:
        coord, leftover = coord + sign * distance, 0.0
    if horizontal:
        entity.x = coord
    else:
        entity.y = coord
    wrap_position(entity, grid)
    return leftover


def advance(entity: Entity, dt: float, grid: MazeGrid) -> float:
    """Move ``entity`` along its direction for ``dt`` seconds, then wrap.

    A single call stops on the next tile centre instead of running past it,
    so ``is_tile_aligned`` is hit at every tile whatever the frame time.
    Returns the pixels of travel left unspent by that stop.
    """
    return _move(entity, entity.speed * dt, grid)


def travel(entity: Entity, dt: float, grid: MazeGrid, target: Optional[Tile] = None) -> None:
    """Resolve intent and move for one frame.

    Whenever the move ends on a tile centre with distance to spare, intent is
    resolved again there and the rest is spent on the new heading. The entity
    covers ``speed * dt`` pixels unless it comes to a stop.
    """
    distance = entity.speed * dt
    while True:
        step_intent(entity, grid, target)
        distance = _move(entity, distance, grid)
        if distance <= 0 or entity.direction is Direction.NONE:
            return


def wrap_position(entity: Entity, grid: MazeGrid) -> None:
    """Teleport across the side tunnels. Idempotent once applied."""
    half = grid.tile_size / 2
    left_bound = -half
    right_bound = grid.pixel_width + half
    if entity.x < left_bound:
        entity.x = right_bound
    elif entity.x > right_bound:
        entity.x = left_bound
