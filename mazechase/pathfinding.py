"""Breadth-first shortest paths over the maze grid."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Tuple

from .maze import EntityKind, MazeGrid, Tile

# Neighbour order is part of the contract: it decides which of several
# equal-length routes wins, and must stay fixed so pursuers are reproducible.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def passable_neighbors(grid: MazeGrid, tile: Tile, kind: EntityKind) -> Iterable[Tile]:
    """Yield 4-adjacent tiles that ``kind`` may enter.

    Columns off the grid are open space (see ``MazeGrid.is_wall``). The search
    reaches one column past each edge, where the tunnel mouths are, and no
    further, so it stays bounded.
    """
    x, y = tile
    for dx, dy in NEIGHBOR_OFFSETS:
        nb = (x + dx, y + dy)
        if not -1 <= nb[0] <= grid.cols:
            continue
        if grid.is_passable(nb, kind):
            yield nb


def shortest_path(
    grid: MazeGrid,
    start: Tile,
    goal: Tile,
    kind: EntityKind = EntityKind.PURSUER,
) -> List[Tile]:
    """Return the tiles from ``start`` to ``goal`` using BFS.

    The returned list excludes ``start`` and ends with ``goal``. It is empty
    when the goal is unreachable or when ``start == goal``; callers treat both
    as "no new step", not as a failure.
    """
    if start == goal:
        return []

    # Parent links double as the visited set; start maps to itself.
    parent: Dict[Tile, Tile] = {start: start}
    queue: deque[Tile] = deque([start])
    found = False

    while queue:
        current = queue.popleft()
        if current == goal:
            found = True
            break
        for nb in passable_neighbors(grid, current, kind):
            if nb in parent:
                continue
            parent[nb] = current
            queue.append(nb)

    if not found:
        return []

    # Walk parent links back from the goal, then flip to start->goal order.
    path: List[Tile] = []
    step = goal
    while step != start:
        path.append(step)
        step = parent[step]
    path.reverse()
    return path
