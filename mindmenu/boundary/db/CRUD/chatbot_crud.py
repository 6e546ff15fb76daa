"""
Chatbot CRUD operations.

Provides chatbot lookups by branch and the status transitions used by the
indexing job runner.

Dependencies: sqlalchemy, mindmenu.boundary.db.models.chatbot_model
System role: Chatbot lifecycle persistence
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.base_crud import BaseCRUD
from mindmenu.boundary.db.models.chatbot_model import ChatbotModel, ChatbotStatus


class ChatbotCRUD(BaseCRUD[ChatbotModel]):
    """
    CRUD operations for ChatbotModel.

    Extends BaseCRUD with branch lookup and status transitions.
    """

    def __init__(self) -> None:
        """Initialize ChatbotCRUD with ChatbotModel."""
        super().__init__(ChatbotModel)

    async def get_by_branch_id(
        self,
        session: AsyncSession,
        branch_id: UUID,
    ) -> ChatbotModel | None:
        """
        Retrieve the chatbot of a branch.

        Args:
            session: Async database session
            branch_id: Branch UUID

        Returns:
            ChatbotModel if found, None otherwise
        """
        stmt = select(ChatbotModel).where(ChatbotModel.branch_id == branch_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_building(self, session: AsyncSession, id: UUID) -> ChatbotModel | None:
        """Move a chatbot into BUILDING and clear the previous error."""
        return await self.update_by_id(
            session,
            id,
            status=ChatbotStatus.BUILDING,
            last_error=None,
        )

    async def mark_active(
        self,
        session: AsyncSession,
        id: UUID,
        content_hash: str,
    ) -> ChatbotModel | None:
        """
        Record a successful index.

        The version is bumped only when the indexed document differs from the
        previously recorded one.

        Args:
            session: Async database session
            id: Chatbot UUID
            content_hash: Document hash of the content just indexed

        Returns:
            Updated ChatbotModel if found, None otherwise
        """
        chatbot = await self.get_by_id(session, id)
        if chatbot is None:
            return None

        version = chatbot.version
        if chatbot.content_hash != content_hash:
            version += 1

        return await self.update_by_id(
            session,
            id,
            status=ChatbotStatus.ACTIVE,
            content_hash=content_hash,
            version=version,
            last_error=None,
        )

    async def mark_error(
        self,
        session: AsyncSession,
        id: UUID,
        error: str,
    ) -> ChatbotModel | None:
        """Record a failed index with its error message."""
        return await self.update_by_id(
            session,
            id,
            status=ChatbotStatus.ERROR,
            last_error=error,
        )


chatbot_crud = ChatbotCRUD()
