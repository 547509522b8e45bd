"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Every tunable of the simulation lives here so a run can be reproduced
from its environment alone.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhysicsSettings(BaseSettings):
    """Actor physics."""

    gravity: float = Field(default=0.09, gt=0.0)
    jump_impulse: float = Field(default=2.8, gt=0.0)
    ground_y: float = 24.0


class SpawnSettings(BaseSettings):
    """Obstacle spawn gate."""

    interval_ticks: int = Field(default=15, ge=1)
    threshold: float = Field(default=0.9, ge=0.0, le=1.0)
    max_height: float = Field(default=24.0, ge=0.0)
    obstacle_velocity: float = Field(default=1.0, gt=0.0)


class DifficultySettings(BaseSettings):
    """Difficulty ramp and survival credit."""

    ramp_interval_ticks: int = Field(default=100, ge=1)
    ramp_step: float = Field(default=0.03, ge=0.0)


class FieldSettings(BaseSettings):
    """Playfield geometry in world units (y grows upward)."""

    width: float = Field(default=210.0, gt=0.0)
    height: float = Field(default=110.0, gt=0.0)
    ground_line_y: float = 20.0  # drawn ground, below the physics ground
    actor_x: float = 20.0


class DisplaySettings(BaseSettings):
    """Front end and frame pacing."""

    tick_ms: int = Field(default=16, ge=1)
    max_steps_per_frame: int = Field(default=5, ge=1)

    # Pygame window
    window_width: int = 840
    window_height: int = 480
    window_fps: int = 60


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="JUMPBOI_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    frontend: Literal["terminal", "window"] = "terminal"
    debug: bool = False
    seed: Optional[int] = None
    log_file: Optional[Path] = Path("jumpboi.log")

    # Nested settings
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    spawn: SpawnSettings = Field(default_factory=SpawnSettings)
    difficulty: DifficultySettings = Field(default_factory=DifficultySettings)
    playfield: FieldSettings = Field(default_factory=FieldSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def is_terminal(self) -> bool:
        """Check if running in the terminal front end."""
        return self.frontend == "terminal"

    @property
    def tick_seconds(self) -> float:
        """Fixed tick length in seconds."""
        return self.display.tick_ms / 1000.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
