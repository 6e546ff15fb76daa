"""
Chat history adapter.

Conversation store on top of ChatHistoryCRUD: appends turns and returns the
bounded, chronological history used for prompting.

Dependencies: mindmenu.boundary.db.CRUD.chat_history_crud
System role: Chat history business logic adapter
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.chat_history_crud import chat_history_crud
from mindmenu.core.rag.models import ConversationTurn


class ChatHistoryAdapter:
    """
    High-level adapter for one chat session's history.

    Turns are append-only; nothing here updates or deletes them.
    """

    def __init__(self, session_id: str, db: AsyncSession) -> None:
        """
        Args:
            session_id: Chat session key
            db: AsyncSession for database operations
        """
        self.session_id = session_id
        self.db = db

    async def get_recent_turns(self, limit: int = 5) -> list[ConversationTurn]:
        """
        Most recent turns of the session, oldest first.

        Args:
            limit: Maximum number of turns

        Returns:
            list[ConversationTurn]: Chronological turns
        """
        rows = await chat_history_crud.get_recent(self.db, self.session_id, limit=limit)
        return [
            ConversationTurn(
                query=row.query,
                response=row.response,
                language=row.language,
                timestamp=row.timestamp,
            )
            for row in rows
        ]

    async def add_turn(
        self,
        query: str,
        response: str,
        language: str = "en",
        branch_id: UUID | None = None,
    ) -> None:
        """Append a question/answer turn."""
        await chat_history_crud.add_turn(
            self.db,
            session_id=self.session_id,
            query=query,
            response=response,
            language=language,
            branch_id=branch_id,
        )

    async def get_history(self):
        """Every turn of the session, oldest first."""
        return await chat_history_crud.get_by_session_id(self.db, self.session_id)
