"""Configuration settings for the Thirstee cache service."""

from pathlib import Path
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


def _find_env_file() -> str:
    """Find .env file - check current dir, then parent (repository root)."""
    current = Path.cwd()

    # Check current directory
    if (current / ".env").exists():
        return str(current / ".env")

    # Check parent directory (when running from server/)
    if (current.parent / ".env").exists():
        return str(current.parent / ".env")

    # Default to current directory
    return ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    port: int = 3457
    host: str = "0.0.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Cache lifecycle (in seconds)
    default_cache_ttl: float = 300  # 5 minutes
    cache_cleanup_interval: float = 600  # 10 minutes

    # None follows `debug`: fail fast in development, coerce in production
    cache_strict: Optional[bool] = None

    class Config:
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def strict_validation(self) -> bool:
        """Whether bad cache keys/TTLs raise instead of being coerced."""
        if self.cache_strict is None:
            return self.debug
        return self.cache_strict


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
