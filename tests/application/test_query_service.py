"""
Test suite for QueryService.

Indexes the sample document through the real pipeline into an in-memory
store, then queries it with a mocked generator.

System role: Verification of query use cases and chat history storage
"""

from uuid import uuid4

import pytest

from mindmenu.application.services.chat_history_service import ChatHistoryService
from mindmenu.application.services.query_service import QueryService
from mindmenu.boundary.db.CRUD.chat_history_crud import chat_history_crud
from mindmenu.core.exceptions import BranchNotFoundError, ValidationError
from mindmenu.core.knowledge.chunker import chunk_content
from mindmenu.core.knowledge.identity import build_namespace
from mindmenu.core.knowledge.synchronizer import VectorStoreSynchronizer
from mindmenu.core.rag.query_engine import NO_CONTEXT_RESPONSE, RAGQueryEngine
from mindmenu.core.rag.retriever import Retriever


@pytest.fixture
def query_engine(vector_store, embedder, mock_generator) -> RAGQueryEngine:
    """Provide query engine over the in-memory store."""
    return RAGQueryEngine(embedder, Retriever(vector_store, top_k=3), mock_generator, history_window=5)


@pytest.fixture
def indexed_branch(sample_branch, vector_store, embedder, sample_content):
    """Sample branch with its knowledge indexed under its namespace."""
    namespace = build_namespace(str(sample_branch.restaurant_id), sample_branch.name)
    chunks = chunk_content(sample_content, str(sample_branch.restaurant_id), str(sample_branch.id)).chunks
    for chunk, vector in zip(chunks, embedder.embed_many([c.text for c in chunks])):
        chunk.embedding = vector
    VectorStoreSynchronizer(vector_store).sync(namespace, chunks)
    return sample_branch


@pytest.fixture
def query_service(test_async_db, query_engine) -> QueryService:
    """Provide QueryService over the test database."""
    return QueryService(db=test_async_db, query_engine=query_engine, history_window=5)


class TestQuery:
    """Test suite for QueryService.query()."""

    @pytest.mark.asyncio
    async def test_query_should_answer_from_branch_namespace(self, query_service, indexed_branch) -> None:
        """Test the branch's namespace is searched and answered from."""
        result = await query_service.query(indexed_branch.id, "hours: 9am-5pm")

        assert result.response == "We are open from 9am to 5pm."
        assert result.context[0] == "hours: 9am-5pm"
        assert result.debug["namespace"].endswith("_Main_Street")

    @pytest.mark.asyncio
    async def test_query_should_degrade_for_branch_without_knowledge(self, query_service, sample_branch) -> None:
        """Test a branch that was never indexed gets the no-information answer."""
        result = await query_service.query(sample_branch.id, "Do you deliver?")

        assert result.response == NO_CONTEXT_RESPONSE

    @pytest.mark.asyncio
    async def test_query_should_reject_blank_question(self, query_service, sample_branch) -> None:
        """Test whitespace-only questions are invalid."""
        with pytest.raises(ValidationError):
            await query_service.query(sample_branch.id, "   ")

    @pytest.mark.asyncio
    async def test_query_should_raise_for_unknown_branch(self, query_service) -> None:
        """Test a missing branch is a not-found error."""
        with pytest.raises(BranchNotFoundError):
            await query_service.query(uuid4(), "When do you open?")


class TestQueryWithHistory:
    """Test suite for QueryService.query_with_history()."""

    @pytest.mark.asyncio
    async def test_query_with_history_should_store_turn(
        self, query_service, test_async_db, indexed_branch, chat_session_id
    ) -> None:
        """Test the answered turn is appended to the session."""
        # Act
        result, session_id = await query_service.query_with_history(
            indexed_branch.id, "hours: 9am-5pm", session_id=chat_session_id, language="zh"
        )

        # Assert
        assert session_id == chat_session_id
        turns = await chat_history_crud.get_by_session_id(test_async_db, chat_session_id)
        assert len(turns) == 1
        assert turns[0].response == result.response
        assert turns[0].language == "zh"
        assert turns[0].branch_id == indexed_branch.id

    @pytest.mark.asyncio
    async def test_query_with_history_should_feed_prior_turns(
        self, query_service, mock_generator, indexed_branch, chat_session_id
    ) -> None:
        """Test the second question sees the first turn in its prompt."""
        await query_service.query_with_history(indexed_branch.id, "hours: 9am-5pm", session_id=chat_session_id)

        result, _ = await query_service.query_with_history(
            indexed_branch.id, "appetizers item 0: \"Soup\"", session_id=chat_session_id
        )

        prompt = mock_generator.generate.call_args.args[0]
        assert "User: hours: 9am-5pm" in prompt
        assert result.debug["history_count"] == 1

    @pytest.mark.asyncio
    async def test_query_with_history_should_create_session_and_default_language(
        self, query_service, indexed_branch
    ) -> None:
        """Test a missing session ID is generated and language defaults to English."""
        result, session_id = await query_service.query_with_history(indexed_branch.id, "hours: 9am-5pm")

        assert session_id
        assert result.debug["language"] == "en"
        assert result.debug["history_count"] == 0

    @pytest.mark.asyncio
    async def test_stored_turns_should_be_readable_by_session(
        self, query_service, test_async_db, indexed_branch, chat_session_id
    ) -> None:
        """Test turns written by a session query are returned by the history service."""
        await query_service.query_with_history(indexed_branch.id, "hours: 9am-5pm", session_id=chat_session_id)

        turns = await ChatHistoryService(db=test_async_db).get_session_history(chat_session_id)

        assert [t.query for t in turns] == ["hours: 9am-5pm"]
