"""
Aggregated MindMenu settings.

Settings nests one object per concern (database, vector store, Gemini,
chat) so services receive only the slice they need.

Dependencies: mindmenu.configs.*
System role: Single configuration entry point
"""

from functools import lru_cache

from pydantic import Field

from mindmenu.configs.base import BaseSettings
from mindmenu.configs.chat import ChatSettings
from mindmenu.configs.database import DatabaseSettings
from mindmenu.configs.gemini import GeminiSettings
from mindmenu.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Service-wide fields plus every concern-specific settings group."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)


@lru_cache
def get_settings() -> Settings:
    """Settings read once per process; call get_settings.cache_clear() after changing env in tests."""
    return Settings()
