"""
Application-wide settings shared by the unified Settings class.

Only the root log level lives here; every subsystem keeps its own
prefixed settings class.

Dependencies: pydantic_settings
System role: Root of the settings hierarchy
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings read from unprefixed environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level applied at API startup (LOG_LEVEL)",
    )
