"""
Mazechase Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Game configuration loaded from environment variables."""

    # Movement (pixels per second)
    PLAYER_SPEED: float = float(os.getenv("MAZECHASE_PLAYER_SPEED", "90"))
    PURSUER_SPEED: float = float(os.getenv("MAZECHASE_PURSUER_SPEED", "80"))

    START_LIVES: int = int(os.getenv("MAZECHASE_START_LIVES", "3"))

    # Frame timing. Long frames are clamped so nothing tunnels through walls
    # after a stall.
    MAX_FRAME_SECONDS: float = float(os.getenv("MAZECHASE_MAX_FRAME_SECONDS", "0.05"))
    FPS: int = int(os.getenv("MAZECHASE_FPS", "60"))

    # Window pixels per maze pixel (pygame frontend)
    SCALE: int = int(os.getenv("MAZECHASE_SCALE", "2"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        if cls.PLAYER_SPEED <= 0 or cls.PURSUER_SPEED <= 0:
            raise ValueError(
                "MAZECHASE_PLAYER_SPEED and MAZECHASE_PURSUER_SPEED must be positive"
            )

        if cls.START_LIVES < 0:
            raise ValueError("MAZECHASE_START_LIVES cannot be negative")

        if cls.MAX_FRAME_SECONDS <= 0:
            raise ValueError(
                "MAZECHASE_MAX_FRAME_SECONDS must be positive (default 0.05)"
            )

        if cls.FPS <= 0:
            raise ValueError("MAZECHASE_FPS must be positive")

        if cls.SCALE <= 0:
            raise ValueError("MAZECHASE_SCALE must be a positive integer")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Mazechase Configuration:",
            f"  Player Speed: {cls.PLAYER_SPEED} px/s",
            f"  Pursuer Speed: {cls.PURSUER_SPEED} px/s",
            f"  Start Lives: {cls.START_LIVES}",
            f"  Max Frame: {cls.MAX_FRAME_SECONDS}s",
            f"  FPS: {cls.FPS}",
            f"  Scale: {cls.SCALE}x",
        ]
        return "\n".join(lines)
