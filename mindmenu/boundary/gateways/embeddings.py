"""
Embedding gateway backed by Google Generative AI.

GeminiEmbeddings pins the output dimensionality to the vector index size
and tags requests with the retrieval task type: chunk texts are embedded as
RETRIEVAL_DOCUMENT, customer questions as RETRIEVAL_QUERY. EmbeddingGateway
adds batching, dimension checks and wraps provider errors in EmbeddingError.

Dependencies: langchain_google_genai
System role: Text-to-vector conversion for indexing and querying
"""

import logging
from typing import Any

from langchain_google_genai import GoogleGenerativeAIEmbeddings

from mindmenu.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)

DOCUMENT_TASK = "RETRIEVAL_DOCUMENT"
QUERY_TASK = "RETRIEVAL_QUERY"


class GeminiEmbeddings(GoogleGenerativeAIEmbeddings):
    """Gemini embeddings reduced to `dimension` values, with retrieval task types."""

    dimension: int = 768

    def embed_documents(self, texts: list[str], **kwargs: Any) -> list[list[float]]:
        kwargs.setdefault("task_type", DOCUMENT_TASK)
        kwargs.setdefault("output_dimensionality", self.dimension)
        return super().embed_documents(texts, **kwargs)

    def embed_query(self, text: str, **kwargs: Any) -> list[float]:
        kwargs.setdefault("task_type", QUERY_TASK)
        kwargs.setdefault("output_dimensionality", self.dimension)
        return super().embed_query(text, **kwargs)


class EmbeddingGateway:
    """
    Converts text into fixed-dimension vectors.

    Any provider failure or wrong-sized vector raises EmbeddingError; callers
    treat it as fatal for the indexing job or query.
    """

    def __init__(self, embeddings, dimension: int = 768, batch_size: int = 100) -> None:
        """
        Args:
            embeddings: LangChain Embeddings implementation
            dimension: Expected vector length
            batch_size: Texts per provider request in embed_many
        """
        self.embeddings = embeddings
        self.dimension = dimension
        self.batch_size = batch_size

    def _check(self, vector: list[float]) -> list[float]:
        if len(vector) != self.dimension:
            raise EmbeddingError(
                f"Embedding has dimension {len(vector)}, expected {self.dimension}",
                details={"dimension": len(vector), "expected": self.dimension},
            )
        return list(vector)

    def embed(self, text: str) -> list[float]:
        """
        Embed a single text (query side).

        Raises:
            EmbeddingError: Provider failure or dimension mismatch
        """
        try:
            vector = self.embeddings.embed_query(text)
        except Exception as e:
            raise EmbeddingError(
                f"Embedding request failed: {e}",
                details={"error_type": type(e).__name__},
            ) from e
        return self._check(vector)

    def embed_many(self, texts: list[str]) -> list[list[float]]:
        """
        Embed chunk texts in batches, preserving order.

        Raises:
            EmbeddingError: Provider failure, short response or dimension mismatch
        """
        vectors: list[list[float]] = []
        for start in range(0, len(texts), self.batch_size):
            batch = texts[start:start + self.batch_size]
            try:
                batch_vectors = self.embeddings.embed_documents(batch)
            except Exception as e:
                raise EmbeddingError(
                    f"Embedding request failed: {e}",
                    details={"error_type": type(e).__name__, "batch_start": start},
                ) from e
            if len(batch_vectors) != len(batch):
                raise EmbeddingError(
                    "Embedding provider returned a different number of vectors",
                    details={"requested": len(batch), "returned": len(batch_vectors)},
                )
            vectors.extend(self._check(vector) for vector in batch_vectors)

        logger.info(
            f"{__name__}:embed_many - Embedded {len(texts)} texts",
            extra={"batch_size": self.batch_size},
        )
        return vectors
