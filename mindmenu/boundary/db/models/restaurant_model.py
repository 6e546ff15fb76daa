"""
Restaurant ORM model.

Dependencies: sqlalchemy, mindmenu.boundary.db.base
System role: Restaurant persistence (owner of branches)
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mindmenu.boundary.db.base import Base, TimestampMixin, UUIDMixin


class RestaurantModel(Base, UUIDMixin, TimestampMixin):
    """
    Restaurant registered by an owner.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        description: Optional free-text description
        owner_id: External owner identifier
        branches: Branches of this restaurant (cascading delete)
    """

    __tablename__ = "restaurants"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    branches = relationship(
        "BranchModel",
        back_populates="restaurant",
        cascade="all, delete-orphan",
    )
