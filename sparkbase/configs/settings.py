"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the library
"""

from functools import lru_cache

from pydantic import Field

from sparkbase.configs.base import BaseSettings
from sparkbase.configs.mongo import MongoSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    mongo: MongoSettings = Field(default_factory=MongoSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Environment variables are read once; call ``get_settings.cache_clear()``
    to force a re-read.

    Returns:
        Settings: Settings instance

    Usage:
        from sparkbase.configs import get_settings
        settings = get_settings()
    """
    return Settings()
