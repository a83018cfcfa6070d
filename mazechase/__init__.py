"""
Mazechase - a grid maze chase game engine.

A player eats pellets in a fixed tile maze while pursuers re-plan
breadth-first shortest paths toward the player at every tile centre.

The engine is window-free: all game data lives in a ``SimulationState``
advanced by ``advance(state, dt)``. Renderers and input sources plug into
``GameLoop``.
"""

__version__ = "0.1.0"

# Grid model
from .maze import (
    DEFAULT_LAYOUT,
    TILE_SIZE,
    EntityKind,
    MazeGrid,
    MazeLayoutError,
    TileKind,
    default_maze,
)

# Pathfinding and motion
from .pathfinding import shortest_path
from .entities import Direction, Player, Pursuer, PursuerSpawn, DEFAULT_PURSUERS
from .motion import advance as advance_entity
from .motion import can_move, is_tile_aligned, step_intent, travel, wrap_position

# Game state
from .collectibles import CollectibleStore, PELLET_POINTS, POWER_PELLET_POINTS
from .simulation import (
    Command,
    RunState,
    Simulation,
    SimulationState,
    advance,
    build_snapshot,
    new_game,
    request_direction,
    toggle_pause,
)
from .schemas import EntityView, FrameSnapshot

# Frame loop and collaborators
from .game_loop import FrameClock, GameLoop
from .renderers import (
    AsciiRenderer,
    InputSource,
    Renderer,
    format_lives,
    format_score,
    render_ascii_frame,
)
from .config import Config

__all__ = [
    # Grid model
    "DEFAULT_LAYOUT",
    "TILE_SIZE",
    "EntityKind",
    "MazeGrid",
    "MazeLayoutError",
    "TileKind",
    "default_maze",
    # Pathfinding and motion
    "shortest_path",
    "Direction",
    "Player",
    "Pursuer",
    "PursuerSpawn",
    "DEFAULT_PURSUERS",
    "advance_entity",
    "can_move",
    "is_tile_aligned",
    "step_intent",
    "travel",
    "wrap_position",
    # Game state
    "CollectibleStore",
    "PELLET_POINTS",
    "POWER_PELLET_POINTS",
    "Command",
    "RunState",
    "Simulation",
    "SimulationState",
    "advance",
    "build_snapshot",
    "new_game",
    "request_direction",
    "toggle_pause",
    "EntityView",
    "FrameSnapshot",
    # Frame loop and collaborators
    "FrameClock",
    "GameLoop",
    "AsciiRenderer",
    "InputSource",
    "Renderer",
    "format_lives",
    "format_score",
    "render_ascii_frame",
    "Config",
]
