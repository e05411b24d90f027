"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    app_name: str = "Userboard API"

    # Document store
    data_file: Path = Path("data/db.json")

    # Mounts /api/debug routes (clearing login events)
    debug: bool = False

    log_level: str = "INFO"

    # Dashboard UI origins
    cors_origins: list[str] = [
        "http://localhost:3000",  # Create React App
        "http://localhost:5173",  # Vite dev server
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
