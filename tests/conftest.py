"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite sessions, an in-memory namespace-scoped vector
store, deterministic embeddings, generator mocks and catalog factories.
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

import hashlib
import math
import uuid
from unittest.mock import MagicMock

import pytest
from langchain_core.embeddings import Embeddings

from mindmenu.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from mindmenu.boundary.vdb.vector_store_client import VectorStoreClient

TEST_DIMENSION = 8


class InMemoryVectorStore(VectorStoreClient):
    """Namespace-scoped store kept in dicts; records every call for assertions."""

    def __init__(self) -> None:
        self.namespaces: dict[str, dict[str, VectorRecord]] = {}
        self.calls: list[tuple[str, str, int]] = []

    def fetch(self, namespace, ids):
        self.calls.append(("fetch", namespace, len(ids)))
        stored = self.namespaces.get(namespace, {})
        return {vector_id: stored[vector_id] for vector_id in ids if vector_id in stored}

    def upsert(self, namespace, records):
        self.calls.append(("upsert", namespace, len(records)))
        stored = self.namespaces.setdefault(namespace, {})
        for record in records:
            stored[record.id] = record.model_copy(deep=True)

    def query(self, namespace, vector, top_k):
        self.calls.append(("query", namespace, top_k))
        scored = [
            VectorMatch(id=vector_id, score=_cosine(vector, record.values))
            for vector_id, record in self.namespaces.get(namespace, {}).items()
        ]
        scored.sort(key=lambda match: match.score, reverse=True)
        return scored[:top_k]

    def delete(self, namespace, ids):
        self.calls.append(("delete", namespace, len(ids)))
        stored = self.namespaces.get(namespace, {})
        for vector_id in ids:
            stored.pop(vector_id, None)

    def list_ids(self, namespace):
        self.calls.append(("list", namespace, 0))
        return list(self.namespaces.get(namespace, {}))

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)


def _cosine(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


class HashEmbeddings(Embeddings):
    """Deterministic embeddings: identical texts map to identical vectors."""

    def __init__(self, dimension: int = TEST_DIMENSION) -> None:
        self.dimension = dimension

    def _vector(self, text: str) -> list[float]:
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        return [(byte + 1) / 256 for byte in digest[: self.dimension]]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._vector(text)


@pytest.fixture
async def db_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine shared by every session of the test
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from mindmenu.boundary.db.create_tables import create_all_tables, drop_all_tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory configured like the application's."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(session_factory):
    """
    Create in-memory SQLite async session for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def vector_store() -> InMemoryVectorStore:
    """Provide an empty in-memory vector store."""
    return InMemoryVectorStore()


@pytest.fixture
def hash_embeddings() -> HashEmbeddings:
    """Provide deterministic LangChain embeddings."""
    return HashEmbeddings()


@pytest.fixture
def embedder(hash_embeddings):
    """Provide an embedding gateway over deterministic embeddings."""
    from mindmenu.boundary.gateways.embeddings import EmbeddingGateway

    return EmbeddingGateway(hash_embeddings, dimension=TEST_DIMENSION, batch_size=2)


@pytest.fixture
def mock_generator() -> MagicMock:
    """
    Create mock GenerationGateway.

    Returns:
        MagicMock: generate() returns a fixed answer
    """
    generator = MagicMock()
    generator.generate = MagicMock(return_value="We are open from 9am to 5pm.")
    return generator


@pytest.fixture
def sample_content() -> dict:
    """Knowledge document used across pipeline tests."""
    return {"hours": "9am-5pm", "appetizers": ["Soup", "Salad"]}


@pytest.fixture
async def sample_branch(test_async_db):
    """
    Create a restaurant with one branch.

    Returns:
        BranchModel: Committed branch named "Main Street"
    """
    from mindmenu.boundary.db.CRUD.branch_crud import branch_crud
    from mindmenu.boundary.db.CRUD.restaurant_crud import restaurant_crud

    restaurant = await restaurant_crud.create(
        test_async_db,
        owner_id="owner-1",
        name="Golden Dragon",
    )
    branch = await branch_crud.create(
        test_async_db,
        restaurant_id=restaurant.id,
        name="Main Street",
    )
    await test_async_db.commit()
    return branch


@pytest.fixture
def chat_session_id() -> str:
    """Generate a chat session key."""
    return str(uuid.uuid4())
