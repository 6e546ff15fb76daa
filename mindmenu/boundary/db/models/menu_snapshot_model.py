"""
Menu snapshot ORM model.

Append-only, immutable versions of a branch's knowledge document.

Dependencies: sqlalchemy, mindmenu.boundary.db.base
System role: Knowledge document history and reindex source
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mindmenu.boundary.db.base import Base, TimestampMixin, UUIDMixin


class MenuSnapshotModel(Base, UUIDMixin, TimestampMixin):
    """
    Snapshot of a branch's knowledge document.

    The latest snapshot (by created_at) is the default content for reindexing.

    Attributes:
        branch_id: Owning branch
        content: Knowledge document (JSON object)
        content_hash: Canonical document hash
        author: Optional author of the change
        notes: Optional change notes
    """

    __tablename__ = "menu_snapshots"

    branch_id: Mapped[UUID] = mapped_column(
        ForeignKey("branches.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[dict] = mapped_column(JSON, nullable=False)
    content_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    branch = relationship("BranchModel", back_populates="snapshots")
