"""
Shared settings base for MindMenu.

Every concern-specific settings class inherits the .env loading rules and
the service-wide fields defined here.

Dependencies: pydantic_settings
System role: Root of the configuration hierarchy
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Service-wide settings; environment names carry no prefix."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = Field(default="MindMenu API", description="Title shown in the OpenAPI docs")
    api_prefix: str = Field(default="/api/v1", description="Path prefix for every router")
    log_level: str = Field(default="INFO", description="Root log level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by CORS; JSON list in the environment",
    )
