"""
One fixed time-slice of the game.

All mutable game data lives in a single ``SimulationState`` aggregate that is
passed to and returned from the step functions, so a game can be driven
deterministically without any window or clock. ``Simulation`` is the thin
controller that owns one state for the frame loop.

Step order per frame:
1. Player intent (buffered direction) + movement
2. Each pursuer re-plans toward the player's tile + movement
3. Collectible on the player's tile is consumed and scored

Pursuer contact with the player has no effect: there is no life loss, reset or
"eaten" state in this engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .collectibles import CollectibleStore
from .config import Config
from .entities import (
    DEFAULT_PURSUERS,
    PLAYER_SPAWN,
    Direction,
    Player,
    Pursuer,
    PursuerSpawn,
    spawn_player,
    spawn_pursuer,
)
from .logging_utils import log_debug
from .maze import MazeGrid, Tile, default_maze
from .motion import travel
from .schemas import EntityView, FrameSnapshot


class RunState(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"


class Command(str, Enum):
    """Discrete input commands delivered by an input source."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"


COMMAND_DIRECTIONS = {
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
}


@dataclass
class SimulationState:
    """Everything that changes while a game runs."""

    grid: MazeGrid
    player: Player
    pursuers: List[Pursuer]
    collectibles: CollectibleStore
    score: int = 0
    run_state: RunState = RunState.RUNNING
    frame: int = 0

    @property
    def paused(self) -> bool:
        return self.run_state is RunState.PAUSED


def new_game(
    grid: Optional[MazeGrid] = None,
    *,
    player_speed: Optional[float] = None,
    pursuer_speed: Optional[float] = None,
    lives: Optional[int] = None,
    player_tile: Tile = PLAYER_SPAWN,
    pursuers: Sequence[PursuerSpawn] = DEFAULT_PURSUERS,
) -> SimulationState:
    """Build the initial running state with every collectible in place."""
    grid = grid or default_maze()
    player = spawn_player(
        grid,
        speed=Config.PLAYER_SPEED if player_speed is None else player_speed,
        lives=Config.START_LIVES if lives is None else lives,
        tile=player_tile,
    )
    speed = Config.PURSUER_SPEED if pursuer_speed is None else pursuer_speed
    return SimulationState(
        grid=grid,
        player=player,
        pursuers=[spawn_pursuer(grid, spawn, speed=speed) for spawn in pursuers],
        collectibles=CollectibleStore.from_grid(grid),
    )


def clamp_frame(dt: float, max_frame_seconds: Optional[float] = None) -> float:
    limit = Config.MAX_FRAME_SECONDS if max_frame_seconds is None else max_frame_seconds
    return min(max(dt, 0.0), limit)


def advance(
    state: SimulationState,
    dt: float,
    *,
    max_frame_seconds: Optional[float] = None,
) -> SimulationState:
    """Advance ``state`` by one clamped frame. Paused states are returned untouched."""
    if state.paused:
        return state

    dt = clamp_frame(dt, max_frame_seconds)
    grid = state.grid
    player = state.player

    travel(player, dt, grid)

    # Every pursuer targets the same tile: wherever the player is after moving.
    target = player.tile(grid)
    for pursuer in state.pursuers:
        previous = pursuer.direction
        travel(pursuer, dt, grid, target)
        if pursuer.direction is not previous:
            log_debug(
                f"[Pursuit] {pursuer.name} turns {pursuer.direction.name.lower()} "
                f"({len(pursuer.path)} steps to {target})"
            )

    tile = player.tile(grid)
    points = state.collectibles.consume(tile)
    if points:
        state.score += points
        log_debug(f"[Pellets] +{points} at {tile}, score {state.score}")

    state.frame += 1
    return state


def toggle_pause(state: SimulationState) -> RunState:
    state.run_state = RunState.RUNNING if state.paused else RunState.PAUSED
    return state.run_state


def request_direction(state: SimulationState, direction: Direction) -> None:
    """Buffer a turn; it takes effect at the player's next tile centre."""
    state.player.next_direction = direction


def _view(entity: Player | Pursuer, *, include_path: bool) -> EntityView:
    if isinstance(entity, Pursuer):
        return EntityView(
            kind=entity.kind.value,
            name=entity.name,
            color=entity.color,
            x=entity.x,
            y=entity.y,
            direction=entity.direction.value,
            path=list(entity.path) if include_path else [],
        )
    return EntityView(
        kind=entity.kind.value,
        x=entity.x,
        y=entity.y,
        direction=entity.direction.value,
    )


def build_snapshot(state: SimulationState) -> FrameSnapshot:
    """Copy the renderer-visible parts of ``state``.

    Pursuer paths are only exposed while paused, for the path overlay.
    """
    store = state.collectibles
    return FrameSnapshot(
        tick=state.frame,
        paused=state.paused,
        cleared=store.is_cleared,
        score=state.score,
        lives=state.player.lives,
        pellets=sorted(store.pellets),
        power_pellets=sorted(store.power_pellets),
        player=_view(state.player, include_path=False),
        pursuers=[_view(p, include_path=state.paused) for p in state.pursuers],
    )


class Simulation:
    """Controller owning one ``SimulationState``."""

    def __init__(
        self,
        state: Optional[SimulationState] = None,
        *,
        max_frame_seconds: Optional[float] = None,
    ):
        self.state = state or new_game()
        self.max_frame_seconds = max_frame_seconds

    @property
    def paused(self) -> bool:
        return self.state.paused

    def advance(self, dt: float) -> SimulationState:
        return advance(self.state, dt, max_frame_seconds=self.max_frame_seconds)

    def toggle_pause(self) -> RunState:
        return toggle_pause(self.state)

    def request_direction(self, direction: Direction) -> None:
        request_direction(self.state, direction)

    def apply_command(self, command: Command) -> None:
        """Apply a direction or pause command. ``QUIT`` belongs to the frame loop."""
        if command is Command.TOGGLE_PAUSE:
            self.toggle_pause()
        elif command in COMMAND_DIRECTIONS:
            self.request_direction(COMMAND_DIRECTIONS[command])
        else:
            raise ValueError(f"Command {command.value!r} is not handled by the simulation")

    def snapshot(self) -> FrameSnapshot:
        return build_snapshot(self.state)
