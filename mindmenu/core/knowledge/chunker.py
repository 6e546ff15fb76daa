"""
Knowledge content chunker.

Decomposes a JSON knowledge document into flat, semantically scoped text
chunks. Only the top level and one level of nesting are processed
structurally:

- string value   -> one "general" chunk:  "{key}: {value}"
- list value     -> one "list" chunk per element:  "{key} item {i}: {json}"
- object value   -> one "object" chunk per field:  "{key} - {field}: {json}"

Items that cannot be encoded are skipped and reported as warnings; only a
document that is not a JSON object fails the whole call.

Dependencies: json (stdlib), mindmenu.core.knowledge.models
System role: First stage of the knowledge indexing pipeline
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from mindmenu.core.exceptions import ContentParseError
from mindmenu.core.knowledge.models import (
    CATEGORY_GENERAL,
    CATEGORY_LIST,
    CATEGORY_OBJECT,
    NO_ITEM_INDEX,
    ChunkingResult,
    ChunkMetadata,
    ChunkWarning,
    TextChunk,
)

logger = logging.getLogger(__name__)


def parse_content(content: str | bytes | Mapping[str, Any]) -> dict[str, Any]:
    """
    Parse raw knowledge content into a top-level JSON object.

    Args:
        content: JSON text or an already decoded mapping

    Returns:
        dict: Top-level object

    Raises:
        ContentParseError: When the content is malformed or not an object
    """
    if isinstance(content, Mapping):
        return dict(content)
    if not isinstance(content, (str, bytes, bytearray)):
        raise ContentParseError(
            "Content must be a JSON object",
            details={"type": type(content).__name__},
        )

    try:
        parsed = json.loads(content)
    except (TypeError, ValueError) as e:
        raise ContentParseError(
            f"Content is not valid JSON: {e}",
            details={"error": str(e)},
        ) from e

    if not isinstance(parsed, dict):
        raise ContentParseError(
            "Content must be a JSON object",
            details={"type": type(parsed).__name__},
        )
    return parsed


def encode_value(value: Any) -> str:
    """
    Encode a nested value as compact JSON.

    Raises:
        TypeError, ValueError: When the value has no JSON representation
    """
    return json.dumps(
        value,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
        allow_nan=False,
    )


class ContentChunker:
    """Split a knowledge document into TextChunks with structural metadata."""

    def __init__(self, restaurant_id: str = "", branch_id: str = "") -> None:
        """
        Args:
            restaurant_id: Restaurant stamped on every chunk
            branch_id: Branch stamped on every chunk
        """
        self.restaurant_id = restaurant_id
        self.branch_id = branch_id

    def _metadata(self, source: str, category: str, item_key: str = "", item_index: int = NO_ITEM_INDEX) -> ChunkMetadata:
        return ChunkMetadata(
            restaurant_id=self.restaurant_id,
            branch_id=self.branch_id,
            source=source,
            category=category,
            item_key=item_key,
            item_index=item_index,
        )

    def chunk(self, content: str | bytes | Mapping[str, Any]) -> ChunkingResult:
        """
        Chunk a knowledge document.

        Args:
            content: JSON object as text or mapping

        Returns:
            ChunkingResult: Chunks in document order and skipped-item warnings

        Raises:
            ContentParseError: When the document is not a JSON object
        """
        document = parse_content(content)
        result = ChunkingResult()

        for section, data in document.items():
            if isinstance(data, str):
                result.chunks.append(
                    TextChunk(
                        text=f"{section}: {data}",
                        metadata=self._metadata(section, CATEGORY_GENERAL, item_key=section),
                    )
                )
            elif isinstance(data, list):
                self._chunk_list(section, data, result)
            elif isinstance(data, Mapping):
                self._chunk_object(section, data, result)
            else:
                result.warnings.append(
                    ChunkWarning(
                        source=section,
                        reason=f"unsupported top-level value type: {type(data).__name__}",
                    )
                )

        if result.warnings:
            logger.warning(
                "Skipped items while chunking content",
                extra={
                    "branch_id": self.branch_id,
                    "warning_count": len(result.warnings),
                },
            )
        logger.info(
            "Chunked knowledge content",
            extra={
                "branch_id": self.branch_id,
                "section_count": len(document),
                "chunk_count": len(result.chunks),
            },
        )
        return result

    def _chunk_list(self, section: str, items: list, result: ChunkingResult) -> None:
        for index, item in enumerate(items):
            try:
                encoded = encode_value(item)
            except (TypeError, ValueError) as e:
                result.warnings.append(ChunkWarning(source=section, item=index, reason=str(e)))
                continue
            result.chunks.append(
                TextChunk(
                    text=f"{section} item {index}: {encoded}",
                    metadata=self._metadata(section, CATEGORY_LIST, item_index=index),
                )
            )

    def _chunk_object(self, section: str, fields: Mapping, result: ChunkingResult) -> None:
        for key, value in fields.items():
            try:
                encoded = encode_value(value)
            except (TypeError, ValueError) as e:
                result.warnings.append(ChunkWarning(source=section, item=str(key), reason=str(e)))
                continue
            result.chunks.append(
                TextChunk(
                    text=f"{section} - {key}: {encoded}",
                    metadata=self._metadata(section, CATEGORY_OBJECT, item_key=str(key)),
                )
            )


def chunk_content(
    content: str | bytes | Mapping[str, Any],
    restaurant_id: str = "",
    branch_id: str = "",
) -> ChunkingResult:
    """Convenience wrapper around ContentChunker.chunk."""
    return ContentChunker(restaurant_id=restaurant_id, branch_id=branch_id).chunk(content)
