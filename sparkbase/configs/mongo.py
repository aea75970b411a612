"""
MongoDB configuration settings.

Manages connection parameters handed to the pymongo client.

Dependencies: pydantic, pydantic_settings
System role: Document store connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from sparkbase.configs.base import BaseSettings


class MongoSettings(BaseSettings):
    """MongoDB connection configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MONGO_",
        case_sensitive=False,
        extra="ignore",
    )

    uri: str = Field(default="mongodb://localhost:27017", description="MongoDB connection URI")
    database: str = Field(default="sparkbase", description="Default database name")
    server_selection_timeout_ms: int = Field(
        default=5000,
        description="Milliseconds to wait for a reachable server before failing",
    )
    app_name: str = Field(default="sparkbase", description="Client application name reported to the server")
    tz_aware: bool = Field(default=False, description="Return timezone-aware datetimes from the driver")
