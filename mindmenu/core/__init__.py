"""
Core business logic module.

Contains the knowledge sync pipeline, the query-time RAG flow, the indexing
queue and the exception hierarchy.
"""

from mindmenu.core.exceptions import (
    MindMenuException,
    ValidationError,
    ContentParseError,
    NotFoundError,
    RestaurantNotFoundError,
    BranchNotFoundError,
    ChatbotNotFoundError,
    SnapshotNotFoundError,
    EmbeddingError,
    GenerationError,
    VectorStoreError,
    RetrievalError,
)

__all__ = [
    "MindMenuException",
    "ValidationError",
    "ContentParseError",
    "NotFoundError",
    "RestaurantNotFoundError",
    "BranchNotFoundError",
    "ChatbotNotFoundError",
    "SnapshotNotFoundError",
    "EmbeddingError",
    "GenerationError",
    "VectorStoreError",
    "RetrievalError",
]
