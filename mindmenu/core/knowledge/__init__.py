"""
Knowledge content pipeline.

Chunking, identity/change detection and namespace-scoped vector sync.
"""

from mindmenu.core.knowledge.chunker import ContentChunker, chunk_content, parse_content
from mindmenu.core.knowledge.identity import (
    assign_identity,
    build_namespace,
    compute_content_hash,
    compute_deterministic_id,
    compute_document_hash,
)
from mindmenu.core.knowledge.models import (
    ChunkingResult,
    ChunkMetadata,
    ChunkWarning,
    SyncResult,
    TextChunk,
)
from mindmenu.core.knowledge.synchronizer import VectorStoreSynchronizer

__all__ = [
    "ContentChunker",
    "chunk_content",
    "parse_content",
    "assign_identity",
    "build_namespace",
    "compute_content_hash",
    "compute_deterministic_id",
    "compute_document_hash",
    "ChunkingResult",
    "ChunkMetadata",
    "ChunkWarning",
    "SyncResult",
    "TextChunk",
    "VectorStoreSynchronizer",
]
