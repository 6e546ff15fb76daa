"""
Chat history CRUD operations.

Append-only conversation turns. Recent turns are selected newest first and
returned in chronological order.

Dependencies: sqlalchemy, mindmenu.boundary.db.models.chat_history_model
System role: Conversation persistence for history-aware queries
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.base_crud import BaseCRUD
from mindmenu.boundary.db.models.chat_history_model import ChatHistoryModel


class ChatHistoryCRUD(BaseCRUD[ChatHistoryModel]):
    """CRUD operations for ChatHistoryModel."""

    def __init__(self) -> None:
        """Initialize ChatHistoryCRUD with ChatHistoryModel."""
        super().__init__(ChatHistoryModel)

    async def add_turn(
        self,
        session: AsyncSession,
        session_id: str,
        query: str,
        response: str,
        language: str = "en",
        branch_id: UUID | None = None,
    ) -> ChatHistoryModel:
        """
        Append one question/answer turn to a session.

        Args:
            session: Async database session
            session_id: Chat session key
            query: User question
            response: Assistant answer
            language: Requested language code
            branch_id: Branch the question was asked against

        Returns:
            Created ChatHistoryModel
        """
        return await self.create(
            session,
            session_id=session_id,
            query=query,
            response=response,
            language=language,
            branch_id=branch_id,
        )

    async def get_recent(
        self,
        session: AsyncSession,
        session_id: str,
        limit: int = 5,
    ) -> list[ChatHistoryModel]:
        """
        Retrieve the most recent turns of a session in chronological order.

        Args:
            session: Async database session
            session_id: Chat session key
            limit: Maximum number of turns

        Returns:
            list[ChatHistoryModel]: Oldest of the selected turns first
        """
        stmt = (
            select(ChatHistoryModel)
            .where(ChatHistoryModel.session_id == session_id)
            .order_by(ChatHistoryModel.timestamp.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))

    async def get_by_session_id(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> Sequence[ChatHistoryModel]:
        """Retrieve every turn of a session, oldest first."""
        stmt = (
            select(ChatHistoryModel)
            .where(ChatHistoryModel.session_id == session_id)
            .order_by(ChatHistoryModel.timestamp)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


chat_history_crud = ChatHistoryCRUD()
