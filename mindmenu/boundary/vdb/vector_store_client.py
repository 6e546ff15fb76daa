"""
Vector store client interface.

Namespace-scoped operations every vector store implementation provides.
A namespace is a hard isolation boundary: no operation reads or writes
vectors outside the namespace it is given.

Dependencies: backend-neutral
System role: Contract between core pipeline and vector storage
"""

from abc import ABC, abstractmethod

from mindmenu.boundary.vdb.vector_schemas import VectorMatch, VectorRecord


class VectorStoreClient(ABC):
    """Abstract namespace-scoped vector store."""

    @abstractmethod
    def fetch(self, namespace: str, ids: list[str]) -> dict[str, VectorRecord]:
        """
        Fetch stored vectors by ID.

        Args:
            namespace: Namespace to read from
            ids: Vector IDs (at most one batch)

        Returns:
            dict[str, VectorRecord]: Found records keyed by ID; missing IDs are absent
        """

    @abstractmethod
    def upsert(self, namespace: str, records: list[VectorRecord]) -> None:
        """Insert or replace vectors in a namespace."""

    @abstractmethod
    def query(self, namespace: str, vector: list[float], top_k: int) -> list[VectorMatch]:
        """Return up to top_k nearest vectors, best match first."""

    @abstractmethod
    def delete(self, namespace: str, ids: list[str]) -> None:
        """Delete vectors by ID. Unknown IDs are ignored."""

    @abstractmethod
    def list_ids(self, namespace: str) -> list[str]:
        """List every vector ID stored in a namespace."""
