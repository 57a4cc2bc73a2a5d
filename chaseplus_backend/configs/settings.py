"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from chaseplus_backend.configs.asset_storage import AssetStorageSettings
from chaseplus_backend.configs.auth import AuthSettings
from chaseplus_backend.configs.base import BaseSettings
from chaseplus_backend.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    assets: AssetStorageSettings = Field(default_factory=AssetStorageSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from chaseplus_backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
