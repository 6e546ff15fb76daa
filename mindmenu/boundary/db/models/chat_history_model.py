"""
Chat history ORM model.

Dependencies: sqlalchemy, mindmenu.boundary.db.base
System role: Append-only conversation turns keyed by session
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mindmenu.boundary.db.base import Base, UUIDMixin, utc_now


class ChatHistoryModel(Base, UUIDMixin):
    """
    One question/answer turn of a chat session.

    Attributes:
        session_id: Client-supplied session key
        branch_id: Branch the question was asked against
        query: User question
        response: Assistant answer
        language: Language code the answer was requested in
        timestamp: Turn time (UTC)
    """

    __tablename__ = "chat_history"

    session_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    branch_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, default=None)
    query: Mapped[str] = mapped_column(Text, nullable=False)
    response: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(String(10), nullable=False, default="en")
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )
