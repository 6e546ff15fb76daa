"""
Namespace-scoped vector store synchronizer.

Makes a namespace reflect the current chunk set while re-sending only what
changed. Stored vectors carry their content hash, so a resubmission fetches
stored hashes by deterministic ID and classifies each chunk:

- new:       ID not stored              -> upsert
- updated:   stored hash differs        -> upsert
- unchanged: stored hash equals current -> skipped

Stale IDs are never removed during sync. Deletion is explicit
(delete_vectors) or requested as a prune pass.

Dependencies: mindmenu.boundary.vdb, mindmenu.core.knowledge
System role: Selective upsert stage of the indexing pipeline
"""

import logging
from typing import Callable, Iterator, Sequence

from mindmenu.boundary.vdb.vector_schemas import VectorRecord
from mindmenu.boundary.vdb.vector_store_client import VectorStoreClient
from mindmenu.core.exceptions import MindMenuException, VectorStoreError
from mindmenu.core.knowledge.identity import assign_identity
from mindmenu.core.knowledge.models import SyncResult, TextChunk

logger = logging.getLogger(__name__)

EmbedFn = Callable[[list[str]], list[list[float]]]


def batched(items: Sequence, size: int) -> Iterator[Sequence]:
    """Yield consecutive slices of at most size items."""
    for start in range(0, len(items), size):
        yield items[start:start + size]


class VectorStoreSynchronizer:
    """
    Selective upsert of chunks into one namespace.

    Round-trips are batched: IDs per fetch and vectors per upsert/delete are
    capped at batch_size. A failing batch aborts the call; batches that
    already succeeded are not rolled back.
    """

    def __init__(self, store: VectorStoreClient, batch_size: int = 100) -> None:
        """
        Args:
            store: Namespace-scoped vector store
            batch_size: Maximum IDs/vectors per store round-trip
        """
        self.store = store
        self.batch_size = batch_size

    def _fetch_existing_hashes(self, namespace: str, ids: list[str]) -> dict[str, str]:
        hashes: dict[str, str] = {}
        for batch in batched(ids, self.batch_size):
            try:
                records = self.store.fetch(namespace, list(batch))
            except VectorStoreError:
                raise
            except Exception as e:
                raise VectorStoreError(
                    f"Failed to fetch existing vectors: {e}",
                    operation="fetch",
                    details={"namespace": namespace},
                ) from e
            for vector_id, record in records.items():
                hashes[vector_id] = record.content_hash
        return hashes

    def _upsert(self, namespace: str, chunks: list[TextChunk]) -> None:
        for batch in batched(chunks, self.batch_size):
            records = [
                VectorRecord(id=chunk.id, values=chunk.embedding, metadata=chunk.vector_metadata())
                for chunk in batch
            ]
            try:
                self.store.upsert(namespace, records)
            except VectorStoreError:
                raise
            except Exception as e:
                raise VectorStoreError(
                    f"Failed to upsert vectors: {e}",
                    operation="upsert",
                    details={"namespace": namespace, "batch_size": len(records)},
                ) from e

    def sync(
        self,
        namespace: str,
        chunks: list[TextChunk],
        prune: bool = False,
        embed: EmbedFn | None = None,
    ) -> SyncResult:
        """
        Synchronize a chunk set into a namespace.

        Args:
            namespace: Target namespace
            chunks: Chunks; IDs and hashes are (re)assigned here
            prune: Also delete stored IDs absent from this chunk set
            embed: Embeds texts of new and updated chunks that have no embedding;
                unchanged chunks are never embedded

        Returns:
            SyncResult: new/updated/unchanged counts, upserted and pruned IDs

        Raises:
            VectorStoreError: Fetch, upsert or prune failure
            MindMenuException: A chunk to be sent has no embedding
        """
        chunks = assign_identity(chunks)
        result = SyncResult(namespace=namespace)
        if not chunks:
            if prune:
                result.pruned = self.prune(namespace, set())
            return result

        existing = self._fetch_existing_hashes(namespace, [chunk.id for chunk in chunks])

        to_upsert: list[TextChunk] = []
        for chunk in chunks:
            stored_hash = existing.get(chunk.id)
            if stored_hash is None:
                result.new += 1
                to_upsert.append(chunk)
            elif stored_hash != chunk.content_hash:
                result.updated += 1
                to_upsert.append(chunk)
            else:
                result.unchanged += 1

        pending = [chunk for chunk in to_upsert if not chunk.embedding]
        if pending and embed is not None:
            for chunk, embedding in zip(pending, embed([chunk.text for chunk in pending])):
                chunk.embedding = embedding

        missing_embeddings = [chunk.id for chunk in to_upsert if not chunk.embedding]
        if missing_embeddings:
            raise MindMenuException(
                "Chunks without embeddings cannot be upserted",
                details={"namespace": namespace, "chunk_ids": missing_embeddings[:10]},
            )

        if to_upsert:
            self._upsert(namespace, to_upsert)
            result.upserted_ids = [chunk.id for chunk in to_upsert]

        if prune:
            result.pruned = self.prune(namespace, {chunk.id for chunk in chunks})

        logger.info(
            f"{__name__}:sync - Namespace synchronized",
            extra={
                "namespace": namespace,
                "new": result.new,
                "updated": result.updated,
                "unchanged": result.unchanged,
                "pruned": len(result.pruned),
            },
        )
        return result

    def prune(self, namespace: str, keep_ids: set[str]) -> list[str]:
        """
        Delete every stored ID in the namespace that is not in keep_ids.

        Returns:
            list[str]: Deleted IDs
        """
        try:
            stored_ids = self.store.list_ids(namespace)
        except VectorStoreError:
            raise
        except Exception as e:
            raise VectorStoreError(
                f"Failed to list vectors: {e}",
                operation="list",
                details={"namespace": namespace},
            ) from e

        stale = [vector_id for vector_id in stored_ids if vector_id not in keep_ids]
        if stale:
            self.delete_vectors(namespace, stale)
        return stale

    def delete_vectors(self, namespace: str, ids: list[str]) -> int:
        """
        Delete explicit IDs from a namespace in batches.

        Returns:
            int: Number of IDs submitted for deletion
        """
        if not namespace:
            raise VectorStoreError("Namespace is required for deletion", operation="delete")

        for batch in batched(ids, self.batch_size):
            try:
                self.store.delete(namespace, list(batch))
            except VectorStoreError:
                raise
            except Exception as e:
                raise VectorStoreError(
                    f"Failed to delete vectors: {e}",
                    operation="delete",
                    details={"namespace": namespace},
                ) from e

        logger.info(
            f"{__name__}:delete_vectors - Deleted vectors",
            extra={"namespace": namespace, "count": len(ids)},
        )
        return len(ids)
