"""
Pydantic schemas for frame snapshots.

Renderers and HUD collaborators never touch live simulation objects. Each
tick they receive a ``FrameSnapshot``: a validated, serializable copy of
everything they are allowed to read.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class EntityView(BaseModel):
    """Read-only view of one entity for drawing."""

    kind: str = Field(..., description="'player' or 'pursuer'")
    name: Optional[str] = Field(None, description="Pursuer identity (None for the player)")
    color: str = Field("#ffeb3b", description="Sprite colour as a hex string")
    x: float
    y: float
    direction: Tuple[int, int] = Field((0, 0), description="Unit step (dx, dy); (0, 0) when still")
    # Only populated while the game is paused (diagnostic overlay).
    path: List[Tuple[int, int]] = Field(default_factory=list)


class FrameSnapshot(BaseModel):
    """Everything a renderer or HUD may read for one tick."""

    tick: int = 0
    paused: bool = False
    cleared: bool = Field(False, description="True when no collectibles remain")
    score: int = 0
    lives: int = 0
    pellets: List[Tuple[int, int]] = Field(default_factory=list)
    power_pellets: List[Tuple[int, int]] = Field(default_factory=list)
    player: EntityView
    pursuers: List[EntityView] = Field(default_factory=list)
