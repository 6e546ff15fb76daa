"""
Chat configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Conversation history bounds for query-time prompts
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mindmenu.configs.base import BaseSettings


class ChatSettings(BaseSettings):
    """Conversation history configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="ignore",
    )

    history_window: int = Field(
        default=5,
        ge=1,
        le=5,
        description="Most recent turns rendered into the prompt",
    )
    default_language: str = Field(default="en", description="Language when none is given")
