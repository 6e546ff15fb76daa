"""
Gemini provider configuration settings.

Holds the embedding and chat model settings for the Google Generative AI
gateways.

Dependencies: pydantic, pydantic_settings
System role: LLM provider configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mindmenu.configs.base import BaseSettings


class GeminiSettings(BaseSettings):
    """Google Gemini embedding and generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Google Generative AI API key")
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID (reduced to the vector store dimension)",
    )
    embedding_batch_size: int = Field(
        default=100,
        description="Texts per embedding request when indexing chunks",
    )
    chat_model: str = Field(default="gemini-2.5-flash", description="Generation model ID")
    temperature: float = Field(default=0.2, description="Generation temperature")
