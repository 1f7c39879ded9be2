"""
Configuration management for the dig site.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    GRID_WIDTH,
    GRID_HEIGHT,
    SCORE_BUDGET,
    MAX_ATTEMPTS,
    MAX_SELECTION_DRAWS,
    WALL_HEALTH,
)


class Settings(BaseSettings):
    """Game settings loaded from DIG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Grid
    grid_width: int = Field(default=GRID_WIDTH, ge=1, description="Dig site width in cells")
    grid_height: int = Field(default=GRID_HEIGHT, ge=1, description="Dig site height in cells")

    # Treasures
    score_budget: int = Field(
        default=SCORE_BUDGET,
        ge=0,
        description="Total score of treasures hidden per game"
    )
    max_attempts: int = Field(
        default=MAX_ATTEMPTS,
        ge=0,
        description="Random placement attempts per treasure before the full scan"
    )
    max_selection_draws: int = Field(
        default=MAX_SELECTION_DRAWS,
        ge=1,
        description="Pool draws allowed while filling the score budget"
    )

    # Wall
    wall_health: int = Field(
        default=WALL_HEALTH,
        ge=1,
        description="Wall health at game start; the game is lost at zero"
    )

    # Randomness
    seed: Optional[int] = Field(
        default=None,
        description="Seed for reproducible games. None uses system entropy"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    @property
    def grid_size(self) -> Tuple[int, int]:
        return (self.grid_width, self.grid_height)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    """
    return Settings()
