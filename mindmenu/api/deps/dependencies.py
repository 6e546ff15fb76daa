"""
Dependency injection container.

Factory functions for FastAPI dependencies. Provider clients (vector store,
embedding and generation gateways) and the indexing queue are created once
per process in ServiceCache; services are created per request around the
request's database session.

Dependencies: mindmenu.configs, mindmenu.application, mindmenu.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.application.services import (
    ChatHistoryService,
    ChatbotService,
    IndexingJobRunner,
    QueryService,
    RestaurantService,
    SnapshotService,
)
from mindmenu.boundary.db import get_async_db, get_async_session_factory
from mindmenu.configs import Settings, get_settings
from mindmenu.core.indexing.queue import IndexingQueue


class ServiceCache:
    """Container for cached provider clients and long-lived components."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._embeddings = None
        self._embedder = None
        self._generator = None
        self._vector_store = None
        self._synchronizer = None
        self._retriever = None
        self._query_engine = None
        self._indexing_queue = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def embeddings(self):
        """Get cached LangChain embeddings client."""
        if self._embeddings is None:
            from mindmenu.boundary.gateways.embeddings import GeminiEmbeddings

            kwargs = {}
            if self.settings.gemini.api_key:
                kwargs["google_api_key"] = self.settings.gemini.api_key
            self._embeddings = GeminiEmbeddings(
                model=self.settings.gemini.embedding_model,
                dimension=self.settings.vector_store.dimension,
                **kwargs,
            )
        return self._embeddings

    @property
    def embedder(self):
        """Get cached embedding gateway."""
        if self._embedder is None:
            from mindmenu.boundary.gateways.embeddings import EmbeddingGateway

            self._embedder = EmbeddingGateway(
                self.embeddings,
                dimension=self.settings.vector_store.dimension,
                batch_size=self.settings.gemini.embedding_batch_size,
            )
        return self._embedder

    @property
    def generator(self):
        """Get cached generation gateway."""
        if self._generator is None:
            from langchain_google_genai import ChatGoogleGenerativeAI

            from mindmenu.boundary.gateways.generation import GenerationGateway

            kwargs = {}
            if self.settings.gemini.api_key:
                kwargs["google_api_key"] = self.settings.gemini.api_key
            model = ChatGoogleGenerativeAI(
                model=self.settings.gemini.chat_model,
                temperature=self.settings.gemini.temperature,
                **kwargs,
            )
            self._generator = GenerationGateway(
                model_id=self.settings.gemini.chat_model,
                model=model,
            )
        return self._generator

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from mindmenu.boundary.vdb.vector_store_factory import get_vector_store

            embeddings = self.embeddings if self.settings.vector_store.store_type.lower() == "faiss" else None
            self._vector_store = get_vector_store(embeddings=embeddings)
        return self._vector_store

    @property
    def synchronizer(self):
        """Get cached namespace synchronizer."""
        if self._synchronizer is None:
            from mindmenu.core.knowledge.synchronizer import VectorStoreSynchronizer

            self._synchronizer = VectorStoreSynchronizer(
                self.vector_store,
                batch_size=self.settings.vector_store.batch_size,
            )
        return self._synchronizer

    @property
    def retriever(self):
        """Get cached retriever."""
        if self._retriever is None:
            from mindmenu.core.rag.retriever import Retriever

            self._retriever = Retriever(self.vector_store, top_k=self.settings.vector_store.top_k)
        return self._retriever

    @property
    def query_engine(self):
        """Get cached RAG query engine."""
        if self._query_engine is None:
            from mindmenu.core.rag.query_engine import RAGQueryEngine

            self._query_engine = RAGQueryEngine(
                embedder=self.embedder,
                retriever=self.retriever,
                generator=self.generator,
                history_window=self.settings.chat.history_window,
            )
        return self._query_engine

    @property
    def indexing_queue(self) -> IndexingQueue:
        """Get cached indexing queue (one per process)."""
        if self._indexing_queue is None:
            runner = IndexingJobRunner(
                session_factory=get_async_session_factory(),
                embedder=self.embedder,
                synchronizer=self.synchronizer,
            )
            self._indexing_queue = IndexingQueue(handler=runner)
        return self._indexing_queue

    async def shutdown(self) -> None:
        """Stop the indexing queue and drop cached instances."""
        if self._indexing_queue is not None:
            await self._indexing_queue.shutdown()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embeddings = None
        self._embedder = None
        self._generator = None
        self._vector_store = None
        self._synchronizer = None
        self._retriever = None
        self._query_engine = None
        self._indexing_queue = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_restaurant_service(db: AsyncSession = Depends(get_async_db)) -> RestaurantService:
    """
    Get restaurant service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        RestaurantService: Restaurant/branch service instance
    """
    return RestaurantService(db=db)


def get_snapshot_service(db: AsyncSession = Depends(get_async_db)) -> SnapshotService:
    """Get menu snapshot service instance."""
    return SnapshotService(db=db)


def get_chat_history_service(db: AsyncSession = Depends(get_async_db)) -> ChatHistoryService:
    """Get chat history service instance (database only)."""
    return ChatHistoryService(db=db)


def get_chatbot_service(
    db: AsyncSession = Depends(get_async_db),
    cache: ServiceCache = Depends(get_service_cache),
) -> ChatbotService:
    """
    Get chatbot service instance.

    Args:
        db: Async database session (injected via Depends)
        cache: Service cache holding the indexing queue and synchronizer

    Returns:
        ChatbotService: Chatbot service instance
    """
    return ChatbotService(
        db=db,
        indexing_queue=cache.indexing_queue,
        synchronizer=cache.synchronizer,
    )


def get_query_service(
    db: AsyncSession = Depends(get_async_db),
    cache: ServiceCache = Depends(get_service_cache),
) -> QueryService:
    """
    Get query service instance with the cached RAG query engine.

    Args:
        db: Async database session (injected via Depends)
        cache: Service cache holding the query engine

    Returns:
        QueryService: Query service instance
    """
    return QueryService(
        db=db,
        query_engine=cache.query_engine,
        history_window=cache.settings.chat.history_window,
        default_language=cache.settings.chat.default_language,
    )
