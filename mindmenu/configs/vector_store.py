"""
Vector store configuration settings.

Manages the namespace-scoped vector index used by the knowledge base:
S3 Vectors in production, a persisted FAISS index per namespace locally.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for knowledge sync and retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mindmenu.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="s3",
        description="Vector store type: 'faiss' for local dev, 's3' for production",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    vectors_bucket: str = Field(
        default="mindmenu-vectors",
        description="S3 Vectors bucket holding one index per branch namespace",
    )
    index_prefix: str = Field(
        default="mindmenu",
        description="Prefix for per-namespace S3 Vectors index names",
    )
    distance_metric: str = Field(default="cosine", description="Index distance metric")
    dimension: int = Field(default=768, description="Embedding vector dimension")

    top_k: int = Field(default=5, description="Number of nearest vectors per query")
    batch_size: int = Field(
        default=100,
        description="IDs per fetch and vectors per upsert/delete round-trip",
    )

    faiss_index_dir: str = Field(
        default="/tmp/.mindmenu_faiss",
        description="Directory for per-namespace FAISS indexes (dev only)",
    )
