"""
Namespace-scoped retriever.

Runs a top-K similarity query, then resolves match metadata by ID and
returns the stored chunk texts in match rank order.

Dependencies: mindmenu.boundary.vdb
System role: Context retrieval stage of the RAG query flow
"""

import logging

from mindmenu.boundary.vdb.vector_store_client import VectorStoreClient
from mindmenu.core.exceptions import RetrievalError
from mindmenu.core.rag.models import RetrievalResult

logger = logging.getLogger(__name__)


class Retriever:
    """Retrieve context texts for a query embedding from one namespace."""

    def __init__(self, store: VectorStoreClient, top_k: int = 5) -> None:
        self.store = store
        self.top_k = top_k

    def retrieve(self, embedding: list[float], namespace: str) -> RetrievalResult:
        """
        Retrieve context for a query embedding.

        Matches whose metadata has no text are skipped. A failure while
        resolving metadata yields an empty context list rather than an error.

        Args:
            embedding: Query vector
            namespace: Namespace to search

        Returns:
            RetrievalResult: Context texts in rank order plus matched IDs

        Raises:
            RetrievalError: When the similarity query itself fails
        """
        try:
            matches = self.store.query(namespace, embedding, self.top_k)
        except Exception as e:
            raise RetrievalError(
                f"Failed to query knowledge base: {e}",
                namespace=namespace,
                details={"error_type": type(e).__name__},
            ) from e

        match_ids = [match.id for match in matches]
        result = RetrievalResult(match_ids=match_ids)
        if not match_ids:
            logger.info(f"{__name__}:retrieve - No matching vectors", extra={"namespace": namespace})
            return result

        try:
            records = self.store.fetch(namespace, match_ids)
        except Exception as e:
            logger.warning(
                f"{__name__}:retrieve - Fetch failed, continuing without context: {e}",
                extra={"namespace": namespace, "matches": len(match_ids)},
            )
            return result

        for vector_id in match_ids:
            record = records.get(vector_id)
            if record is None:
                continue
            text = record.metadata.get("text")
            if isinstance(text, str) and text:
                result.contexts.append(text)

        logger.info(
            f"{__name__}:retrieve - Retrieved context",
            extra={
                "namespace": namespace,
                "matches": len(match_ids),
                "context_count": len(result.contexts),
            },
        )
        return result
