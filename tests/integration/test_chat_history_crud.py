"""
Integration tests for ChatHistoryCRUD and ChatHistoryAdapter.

System role: Verification of conversation persistence and history bounding
"""

from datetime import datetime, timedelta, timezone

import pytest

from mindmenu.application.adapters.chat_history_adapter import ChatHistoryAdapter
from mindmenu.boundary.db.CRUD.chat_history_crud import chat_history_crud


async def add_turns(db, session_id: str, count: int) -> None:
    start = datetime.now(timezone.utc) - timedelta(minutes=count)
    for i in range(count):
        await chat_history_crud.create(
            db,
            session_id=session_id,
            query=f"q{i}",
            response=f"a{i}",
            timestamp=start + timedelta(minutes=i),
        )


class TestChatHistoryCRUD:
    """Test suite for ChatHistoryCRUD."""

    @pytest.mark.asyncio
    async def test_add_turn_should_store_language_and_branch(self, test_async_db, sample_branch, chat_session_id) -> None:
        """Test a stored turn keeps all its fields."""
        turn = await chat_history_crud.add_turn(
            test_async_db,
            session_id=chat_session_id,
            query="Open on Sunday?",
            response="Yes",
            language="ja",
            branch_id=sample_branch.id,
        )

        assert turn.language == "ja"
        assert turn.branch_id == sample_branch.id
        assert turn.timestamp is not None

    @pytest.mark.asyncio
    async def test_get_recent_should_return_latest_turns_chronologically(self, test_async_db, chat_session_id) -> None:
        """Test the newest `limit` turns are returned oldest first."""
        await add_turns(test_async_db, chat_session_id, 7)

        recent = await chat_history_crud.get_recent(test_async_db, chat_session_id, limit=5)

        assert [t.query for t in recent] == ["q2", "q3", "q4", "q5", "q6"]

    @pytest.mark.asyncio
    async def test_get_recent_should_isolate_sessions(self, test_async_db, chat_session_id) -> None:
        """Test other sessions' turns are never returned."""
        await add_turns(test_async_db, chat_session_id, 2)
        await add_turns(test_async_db, "other-session", 3)

        recent = await chat_history_crud.get_recent(test_async_db, chat_session_id, limit=5)

        assert len(recent) == 2

    @pytest.mark.asyncio
    async def test_get_by_session_id_should_return_every_turn_in_order(self, test_async_db, chat_session_id) -> None:
        """Test the full session history is chronological."""
        await add_turns(test_async_db, chat_session_id, 6)

        turns = await chat_history_crud.get_by_session_id(test_async_db, chat_session_id)

        assert [t.query for t in turns] == [f"q{i}" for i in range(6)]


class TestChatHistoryAdapter:
    """Test suite for ChatHistoryAdapter."""

    @pytest.mark.asyncio
    async def test_get_recent_turns_should_map_to_conversation_turns(self, test_async_db, chat_session_id) -> None:
        """Test stored rows become ConversationTurns in chronological order."""
        await add_turns(test_async_db, chat_session_id, 3)
        adapter = ChatHistoryAdapter(session_id=chat_session_id, db=test_async_db)

        turns = await adapter.get_recent_turns(limit=2)

        assert [(t.query, t.response) for t in turns] == [("q1", "a1"), ("q2", "a2")]

    @pytest.mark.asyncio
    async def test_new_session_should_have_no_turns(self, test_async_db) -> None:
        """Test an unknown session has empty history."""
        adapter = ChatHistoryAdapter(session_id="never-used", db=test_async_db)

        assert await adapter.get_recent_turns() == []
