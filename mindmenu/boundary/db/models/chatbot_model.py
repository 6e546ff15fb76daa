"""
Chatbot ORM model.

Tracks the indexing lifecycle of a branch's knowledge base.

Dependencies: sqlalchemy, mindmenu.boundary.db.base
System role: Chatbot status persistence for background indexing
"""

import enum
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mindmenu.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ChatbotStatus(str, enum.Enum):
    """
    Chatbot indexing states.

    IDLE: Created, no indexing requested yet
    BUILDING: Indexing job queued or running
    ACTIVE: Last indexing job succeeded; queries are served
    ERROR: Last indexing job failed; see last_error
    """

    IDLE = "idle"
    BUILDING = "building"
    ACTIVE = "active"
    ERROR = "error"


class ChatbotModel(Base, UUIDMixin, TimestampMixin):
    """
    One chatbot per branch.

    Attributes:
        branch_id: Owning branch (unique)
        namespace: Vector namespace the knowledge base is stored in
        status: Indexing state
        content_hash: Document hash of the last successfully indexed content
        version: Incremented when a successful index changes content_hash
        last_error: Message of the last failed indexing job
    """

    __tablename__ = "chatbots"

    branch_id: Mapped[UUID] = mapped_column(
        ForeignKey("branches.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    namespace: Mapped[str] = mapped_column(String(512), nullable=False)
    status: Mapped[ChatbotStatus] = mapped_column(
        Enum(ChatbotStatus, native_enum=False),
        nullable=False,
        default=ChatbotStatus.IDLE,
    )
    content_hash: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_error: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
