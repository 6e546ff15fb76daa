"""
Vector database schemas.

Pydantic models exchanged between the synchronizer/retriever and the
vector store implementations.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class VectorRecord(BaseModel):
    """A stored (or to-be-stored) vector with its metadata."""

    id: str = Field(description="Deterministic chunk ID")
    values: list[float] = Field(default_factory=list, description="Embedding values")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")

    @property
    def content_hash(self) -> str:
        return str(self.metadata.get("content_hash", ""))


class VectorMatch(BaseModel):
    """Single similarity query match, in rank order."""

    id: str = Field(description="Matched vector ID")
    score: float = Field(description="Similarity score (higher is closer)")
