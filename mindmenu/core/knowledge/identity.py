"""
Chunk identity and change detection.

Vector IDs depend only on a chunk's structural position, so editing a
field's value keeps its ID. Content hashes cover text and provenance and
decide whether a stored vector is stale.

Dependencies: hashlib (stdlib)
System role: Stable diffing of knowledge chunks across resubmissions
"""

import hashlib
import json
from collections.abc import Iterable, Mapping
from typing import Any

from mindmenu.core.knowledge.models import ChunkMetadata, TextChunk

ID_PREFIX = "mm_"


def _sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def item_part(metadata: ChunkMetadata) -> str:
    """Item component of the identity key: key:<field> or idx:<index>."""
    if metadata.item_key:
        return f"key:{metadata.item_key}"
    return f"idx:{metadata.item_index}"


def compute_deterministic_id(metadata: ChunkMetadata) -> str:
    """
    Compute the vector ID for a chunk from its metadata.

    Args:
        metadata: Chunk provenance

    Returns:
        str: "mm_" + hex SHA-256 of restaurant|branch|source|category|item
    """
    key = "|".join([
        metadata.restaurant_id.strip(),
        metadata.branch_id.strip(),
        metadata.source.strip(),
        metadata.category.strip(),
        item_part(metadata),
    ])
    return ID_PREFIX + _sha256_hex(key)


def compute_content_hash(chunk: TextChunk) -> str:
    """Hex SHA-256 of trimmed text|source|category."""
    value = "|".join([
        chunk.text.strip(),
        chunk.metadata.source.strip(),
        chunk.metadata.category.strip(),
    ])
    return _sha256_hex(value)


def assign_identity(chunks: Iterable[TextChunk]) -> list[TextChunk]:
    """
    Set id and content_hash on every chunk (in place) and return them as a list.

    Placeholder IDs from earlier stages are overwritten.
    """
    assigned = []
    for chunk in chunks:
        chunk.id = compute_deterministic_id(chunk.metadata)
        chunk.content_hash = compute_content_hash(chunk)
        assigned.append(chunk)
    return assigned


def compute_document_hash(document: Mapping[str, Any]) -> str:
    """Hex SHA-256 of a knowledge document's canonical JSON encoding."""
    canonical = json.dumps(
        document,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
    )
    return _sha256_hex(canonical)


def build_namespace(restaurant_id: str, branch_name: str) -> str:
    """Vector namespace for a branch: "{restaurant_id}_{branch name, spaces -> _}"."""
    return f"{restaurant_id}_{branch_name.replace(' ', '_')}"
