"""
Branch ORM model.

Dependencies: sqlalchemy, mindmenu.boundary.db.base
System role: Branch persistence; a branch owns one vector namespace
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mindmenu.boundary.db.base import Base, TimestampMixin, UUIDMixin


class BranchModel(Base, UUIDMixin, TimestampMixin):
    """
    Physical branch of a restaurant.

    Attributes:
        restaurant_id: Parent restaurant
        name: Branch name (part of the vector namespace)
        address: Optional street address
        has_chatbot: True once a chatbot finished indexing for this branch
    """

    __tablename__ = "branches"

    restaurant_id: Mapped[UUID] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    has_chatbot: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    restaurant = relationship("RestaurantModel", back_populates="branches")
    snapshots = relationship(
        "MenuSnapshotModel",
        back_populates="branch",
        cascade="all, delete-orphan",
    )
