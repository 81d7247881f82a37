"""
Configuration management for basketball-stat.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables (or a local .env file).
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import TEAM_BLACK, TEAM_RED


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Example: DATA_BASE_URL="http://localhost:8080/data" points the loader
    at a locally served copy of the season files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Data Source
    # ==========================================================================
    data_base_url: str = Field(
        default="https://jasoncai-ai.github.io/basketball-stat/data",
        description="Root URL holding one directory per season year",
    )
    files_config_name: str = Field(
        default="basketball_files_config.json",
        description="Per-season file mapping game dates to game file names",
    )

    # ==========================================================================
    # HTTP Client
    # ==========================================================================
    request_timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=1, le=10)
    requests_per_minute: int = Field(default=600, ge=1)

    # ==========================================================================
    # Team Labels
    # ==========================================================================
    team_red: str = TEAM_RED
    team_black: str = TEAM_BLACK

    @computed_field
    @property
    def teams(self) -> tuple[str, str]:
        """The two team labels recognized in game score tables."""
        return (self.team_red, self.team_black)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
