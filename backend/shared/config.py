"""
Centralized configuration for the catalog accounts core.

All settings are loaded from environment variables with sensible defaults.
Store settings are namespaced under MONGODB_*.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "catalog"
    mongodb_timeout_ms: int = 5000  # server selection timeout

    # Collection names
    users_collection: str = "users"
    sessions_collection: str = "sessions"
    comments_collection: str = "comments"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
