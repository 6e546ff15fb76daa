"""
MindMenu configuration.

pydantic-settings classes loaded from the environment and .env, one per
concern, aggregated by Settings.
"""

from mindmenu.configs.chat import ChatSettings
from mindmenu.configs.database import DatabaseSettings
from mindmenu.configs.gemini import GeminiSettings
from mindmenu.configs.settings import Settings, get_settings
from mindmenu.configs.vector_store import VectorStoreSettings

__all__ = [
    "ChatSettings",
    "DatabaseSettings",
    "GeminiSettings",
    "Settings",
    "VectorStoreSettings",
    "get_settings",
]
