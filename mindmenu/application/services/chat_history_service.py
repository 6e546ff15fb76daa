"""
Chat history read service.

Needs only a database session, so reading a transcript never builds the
embedding or generation clients.

Dependencies: mindmenu.application.adapters
System role: Chat transcript retrieval
"""

from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.application.adapters.chat_history_adapter import ChatHistoryAdapter


class ChatHistoryService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_session_history(self, session_id: str):
        """Every stored turn of a chat session, oldest first."""
        return await ChatHistoryAdapter(session_id=session_id, db=self.db).get_history()
