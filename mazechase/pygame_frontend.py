"""pygame window: keyboard input plus maze, sprite and overlay drawing.

Everything is drawn at maze resolution (one tile = ``grid.tile_size`` pixels)
onto an off-screen surface, then scaled up to the window.
"""

from __future__ import annotations

import math
from typing import List, Optional

import pygame

from .config import Config
from .maze import MazeGrid, TileKind
from .renderers import InputSource, Renderer, format_lives, format_score
from .schemas import EntityView, FrameSnapshot
from .simulation import Command

HUD_HEIGHT = 16

WALL_COLOR = "#1a1aff"
DOOR_COLOR = "#ffb8ff"
PELLET_COLOR = "#ffb897"
POWER_PELLET_COLOR = "#ffffff"
PLAYER_COLOR = "#ffeb3b"

KEY_COMMANDS = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_p: Command.TOGGLE_PAUSE,
}


class RenderSurfaceUnavailableError(Exception):
    """Raised when the game window cannot be opened at startup."""

    def __init__(self, *, reason: str) -> None:
        self.reason = reason
        message = (
            f"Rendering surface unavailable: {reason}\n\n"
            "Remediation tips:\n"
            "  - Run from a desktop session (DISPLAY / WAYLAND_DISPLAY must be set)\n"
            "  - Use --ascii to play headless in the terminal\n"
            "  - Set SDL_VIDEODRIVER=dummy for windowless smoke runs"
        )
        super().__init__(message)


def command_for_event(event: pygame.event.Event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_COMMANDS.get(event.key)
    return None


class PygameFrontend(Renderer, InputSource):
    """Window renderer and keyboard input source in one."""

    def __init__(self, grid: MazeGrid, *, scale: Optional[int] = None, title: str = "Mazechase"):
        self.grid = grid
        self.scale = Config.SCALE if scale is None else scale
        size = (grid.pixel_width, grid.pixel_height + HUD_HEIGHT)
        try:
            pygame.init()
            self.window = pygame.display.set_mode((size[0] * self.scale, size[1] * self.scale))
            pygame.display.set_caption(title)
            self.font = pygame.font.SysFont("monospace", 10, bold=True)
        except pygame.error as e:
            pygame.quit()
            raise RenderSurfaceUnavailableError(reason=str(e)) from e
        self.canvas = pygame.Surface(size)
        self.overlay = pygame.Surface(size, pygame.SRCALPHA)

    # -- input ---------------------------------------------------------------

    def poll(self) -> List[Command]:
        commands = []
        for event in pygame.event.get():
            command = command_for_event(event)
            if command is not None:
                commands.append(command)
        return commands

    # -- drawing -------------------------------------------------------------

    def render(self, frame: FrameSnapshot) -> None:
        self.canvas.fill("black")
        self._draw_maze()
        self._draw_pellets(frame)
        self._draw_player(frame.player)
        for pursuer in frame.pursuers:
            self._draw_pursuer(pursuer)
        if frame.paused:
            self._draw_paths(frame)
            self._draw_pause_overlay()
        self._draw_hud(frame)

        scaled = pygame.transform.scale(self.canvas, self.window.get_size())
        self.window.blit(scaled, (0, 0))
        pygame.display.flip()

    def _draw_maze(self) -> None:
        size = self.grid.tile_size
        for (x, y), kind in self.grid.iter_tiles():
            if kind is TileKind.WALL:
                pygame.draw.rect(self.canvas, WALL_COLOR, (x * size, y * size, size, size))
            elif kind is TileKind.DOOR:
                pygame.draw.rect(self.canvas, DOOR_COLOR, (x * size, y * size + size // 2 - 1, size, 2))

    def _draw_pellets(self, frame: FrameSnapshot) -> None:
        for tile in frame.pellets:
            pygame.draw.circle(self.canvas, PELLET_COLOR, self.grid.center_of_tile(tile), 2)
        for tile in frame.power_pellets:
            pygame.draw.circle(self.canvas, POWER_PELLET_COLOR, self.grid.center_of_tile(tile), 5)

    def _draw_player(self, player: EntityView) -> None:
        radius = self.grid.tile_size / 2 - 1
        center = (player.x, player.y)
        pygame.draw.circle(self.canvas, PLAYER_COLOR, center, radius)
        dx, dy = player.direction
        if (dx, dy) == (0, 0):
            dx = 1
        # Mouth: a black wedge opening along the heading.
        heading = math.atan2(dy, dx)
        wedge = [center]
        for offset in (-0.6, 0.6):
            angle = heading + offset
            wedge.append((player.x + math.cos(angle) * radius * 1.2, player.y + math.sin(angle) * radius * 1.2))
        pygame.draw.polygon(self.canvas, "black", wedge)

    def _draw_pursuer(self, pursuer: EntityView) -> None:
        radius = self.grid.tile_size / 2 - 1
        x, y = pursuer.x, pursuer.y
        pygame.draw.circle(self.canvas, pursuer.color, (x, y), radius, draw_top_left=True, draw_top_right=True)
        pygame.draw.rect(self.canvas, pursuer.color, (x - radius, y, radius * 2, radius))
        pygame.draw.circle(self.canvas, "white", (x - 4, y - 2), 2)
        pygame.draw.circle(self.canvas, "white", (x + 4, y - 2), 2)

    def _draw_paths(self, frame: FrameSnapshot) -> None:
        for pursuer in frame.pursuers:
            if not pursuer.path:
                continue
            points = [(pursuer.x, pursuer.y)]
            points.extend(self.grid.center_of_tile(tile) for tile in pursuer.path)
            pygame.draw.lines(self.canvas, pursuer.color, False, points, 2)

    def _draw_pause_overlay(self) -> None:
        self.overlay.fill((0, 0, 0, 153))
        self.canvas.blit(self.overlay, (0, 0))
        mid_x = self.grid.pixel_width / 2
        mid_y = self.grid.pixel_height / 2
        for text, dy in (("PAUSED", -10), ("Ghost path vectors shown", 12)):
            label = self.font.render(text, True, "white")
            self.canvas.blit(label, label.get_rect(center=(mid_x, mid_y + dy)))

    def _draw_hud(self, frame: FrameSnapshot) -> None:
        top = self.grid.pixel_height + 3
        self.canvas.blit(self.font.render(format_score(frame.score), True, "white"), (4, top))
        lives = self.font.render(format_lives(frame.lives), True, "white")
        self.canvas.blit(lives, (self.grid.pixel_width - lives.get_width() - 4, top))

    def close(self) -> None:
        pygame.quit()
