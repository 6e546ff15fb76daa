"""
FAISS vector store for local development.

Same namespace-scoped interface as S3VectorsStore, backed by one LangChain
FAISS index per namespace persisted under a local directory. Vectors are
L2-normalized so inner product equals cosine similarity.

Dependencies: faiss-cpu, langchain_community.vectorstores, numpy
System role: Local vector store for development RAG
"""

import hashlib
import logging
import re
import threading
from pathlib import Path

import faiss
import numpy as np
from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS
from langchain_community.vectorstores.utils import DistanceStrategy
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from mindmenu.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from mindmenu.boundary.vdb.vector_store_client import VectorStoreClient

logger = logging.getLogger(__name__)

INDEX_FILE = "index.faiss"


class FAISSVectorsStore(VectorStoreClient):
    """
    FAISS vector store for local development.

    Each namespace lives in its own directory; the chunk text is kept as the
    document body and the full chunk metadata as document metadata.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        persist_directory: str = "/tmp/.mindmenu_faiss",
        dimension: int = 768,
    ) -> None:
        """
        Initialize FAISS store.

        Args:
            embeddings: LangChain embeddings used when reloading indexes
            persist_directory: Root directory for per-namespace indexes
            dimension: Vector dimension for new indexes
        """
        self._embeddings = embeddings
        self._persist_dir = Path(persist_directory)
        self._dimension = dimension
        self._stores: dict[str, FAISS] = {}
        self._lock = threading.Lock()

    def _namespace_dir(self, namespace: str) -> Path:
        digest = hashlib.sha256(namespace.encode("utf-8")).hexdigest()[:12]
        slug = re.sub(r"[^A-Za-z0-9_-]+", "-", namespace)[:80]
        return self._persist_dir / f"{slug}-{digest}"

    def _empty_store(self) -> FAISS:
        return FAISS(
            embedding_function=self._embeddings,
            index=faiss.IndexFlatIP(self._dimension),
            docstore=InMemoryDocstore(),
            index_to_docstore_id={},
            normalize_L2=True,
            distance_strategy=DistanceStrategy.MAX_INNER_PRODUCT,
        )

    def _store(self, namespace: str) -> FAISS:
        """Load the namespace index from disk, or create an empty one."""
        if namespace in self._stores:
            return self._stores[namespace]

        folder = self._namespace_dir(namespace)
        if (folder / INDEX_FILE).exists():
            store = FAISS.load_local(
                str(folder),
                self._embeddings,
                allow_dangerous_deserialization=True,
                normalize_L2=True,
                distance_strategy=DistanceStrategy.MAX_INNER_PRODUCT,
            )
            logger.info(f"{__name__}:_store - Loaded index for namespace {namespace}")
        else:
            store = self._empty_store()
        self._stores[namespace] = store
        return store

    def _save(self, namespace: str, store: FAISS) -> None:
        folder = self._namespace_dir(namespace)
        folder.mkdir(parents=True, exist_ok=True)
        store.save_local(str(folder))

    def fetch(self, namespace: str, ids: list[str]) -> dict[str, VectorRecord]:
        with self._lock:
            store = self._store(namespace)
            found = {}
            for vector_id in ids:
                doc = store.docstore.search(vector_id)
                if isinstance(doc, Document):
                    found[vector_id] = VectorRecord(id=vector_id, metadata=dict(doc.metadata))
            return found

    def upsert(self, namespace: str, records: list[VectorRecord]) -> None:
        if not records:
            return
        with self._lock:
            store = self._store(namespace)
            existing = set(store.index_to_docstore_id.values())
            replaced = [r.id for r in records if r.id in existing]
            if replaced:
                store.delete(replaced)
            store.add_embeddings(
                text_embeddings=[(str(r.metadata.get("text", "")), r.values) for r in records],
                metadatas=[r.metadata for r in records],
                ids=[r.id for r in records],
            )
            self._save(namespace, store)
        logger.info(
            f"{__name__}:upsert - Upserted {len(records)} vectors",
            extra={"namespace": namespace, "replaced": len(replaced)},
        )

    def query(self, namespace: str, vector: list[float], top_k: int) -> list[VectorMatch]:
        with self._lock:
            store = self._store(namespace)
            if store.index.ntotal == 0:
                return []
            query = np.array([vector], dtype=np.float32)
            faiss.normalize_L2(query)
            scores, positions = store.index.search(query, min(top_k, store.index.ntotal))
            matches = []
            for score, position in zip(scores[0], positions[0]):
                if position == -1:
                    continue
                matches.append(
                    VectorMatch(id=store.index_to_docstore_id[int(position)], score=float(score))
                )
            return matches

    def delete(self, namespace: str, ids: list[str]) -> None:
        with self._lock:
            store = self._store(namespace)
            existing = set(store.index_to_docstore_id.values())
            present = [vector_id for vector_id in ids if vector_id in existing]
            if not present:
                return
            store.delete(present)
            self._save(namespace, store)
        logger.info(
            f"{__name__}:delete - Deleted {len(present)} vectors",
            extra={"namespace": namespace},
        )

    def list_ids(self, namespace: str) -> list[str]:
        with self._lock:
            return list(self._store(namespace).index_to_docstore_id.values())
