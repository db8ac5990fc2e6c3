"""
Library configuration.

Centralized settings read from ``DENSEMATRIX_*`` environment variables
or a local ``.env`` file.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """densematrix settings"""

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Fuzzy comparison defaults used by Matrix.compare
    COMPARE_TOLERANCE: float = 0.001
    COMPARE_MODE: str = "relative"  # relative, absolute, sigfigs

    class Config:
        env_prefix = "DENSEMATRIX_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
