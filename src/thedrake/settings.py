"""Application configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with ``THEDRAKE_``."""

    model_config = SettingsConfigDict(
        env_prefix="THEDRAKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Board
    board_dimension: int = Field(default=4, ge=2, le=26)
    mountains: list[str] = Field(default_factory=lambda: ["b2"])

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
