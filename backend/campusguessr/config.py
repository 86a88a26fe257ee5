from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./campusguessr.db"
    DATABASE_ECHO: bool = False

    # HTTP
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Game Configuration
    ROUNDS_PER_GAME: int = 5
    ENFORCE_CAMPUS_BOUNDS: bool = False
    LEADERBOARD_MAX_LIMIT: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
