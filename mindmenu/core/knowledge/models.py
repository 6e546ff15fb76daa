"""
Knowledge chunk domain models.

Represents JSON knowledge content decomposed into chunks with structural
provenance, deterministic identity and a content hash.

Dependencies: pydantic
System role: Data structures shared by chunker, identity and synchronizer
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

ChunkCategory = Literal["general", "list", "object"]

CATEGORY_GENERAL: ChunkCategory = "general"
CATEGORY_LIST: ChunkCategory = "list"
CATEGORY_OBJECT: ChunkCategory = "object"

# item_index value for chunks that are not list elements
NO_ITEM_INDEX = -1


class ChunkMetadata(BaseModel):
    """Structural provenance of a chunk inside its knowledge document."""

    restaurant_id: str = Field(default="", description="Owning restaurant ID")
    branch_id: str = Field(default="", description="Owning branch ID")
    source: str = Field(description="Top-level section name")
    category: ChunkCategory = Field(description="general, list or object")
    item_key: str = Field(default="", description="Field name for general/object chunks")
    item_index: int = Field(default=NO_ITEM_INDEX, description="Element index for list chunks")


class TextChunk(BaseModel):
    """
    Chunk of knowledge text ready for embedding and vector storage.

    id is a pure function of metadata (see identity.compute_deterministic_id),
    content_hash a function of text and provenance. Both are empty until
    identity is assigned.
    """

    id: str = Field(default="", description="Deterministic vector ID")
    text: str = Field(description="Chunk text embedded and returned as context")
    metadata: ChunkMetadata
    content_hash: str = Field(default="", description="SHA-256 of text|source|category")
    embedding: list[float] | None = Field(default=None, description="Embedding vector")

    def vector_metadata(self) -> dict[str, Any]:
        """Metadata stored alongside the vector (field names are part of the wire format)."""
        return {
            "restaurant_id": self.metadata.restaurant_id,
            "branch_id": self.metadata.branch_id,
            "source": self.metadata.source,
            "category": self.metadata.category,
            "item_key": self.metadata.item_key,
            "item_index": self.metadata.item_index,
            "text": self.text,
            "content_hash": self.content_hash,
        }


class ChunkWarning(BaseModel):
    """An item skipped during chunking."""

    source: str = Field(description="Section the item belongs to")
    item: str | int | None = Field(default=None, description="Field name or list index")
    reason: str = Field(description="Why the item was skipped")


class ChunkingResult(BaseModel):
    """Chunks extracted from one document plus the items that were skipped."""

    chunks: list[TextChunk] = Field(default_factory=list)
    warnings: list[ChunkWarning] = Field(default_factory=list)


class SyncResult(BaseModel):
    """Outcome of synchronizing one chunk batch into a namespace."""

    namespace: str
    new: int = 0
    updated: int = 0
    unchanged: int = 0
    upserted_ids: list[str] = Field(default_factory=list)
    pruned: list[str] = Field(default_factory=list)

    @property
    def upserted(self) -> int:
        return len(self.upserted_ids)
