"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from chatstore.configs.base import BaseSettings
from chatstore.configs.cache import CacheSettings
from chatstore.configs.cors import CorsSettings
from chatstore.configs.database import DatabaseSettings
from chatstore.configs.pagination import PaginationSettings
from chatstore.configs.security import SecuritySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    app_name: str = "RAG Chat Storage"

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from chatstore.configs import get_settings
        settings = get_settings()
    """
    return Settings()
