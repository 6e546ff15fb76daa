"""
Menu snapshot CRUD operations.

Snapshots are append-only: this class adds no update path.

Dependencies: sqlalchemy, mindmenu.boundary.db.models.menu_snapshot_model
System role: Knowledge document history persistence
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.base_crud import BaseCRUD
from mindmenu.boundary.db.models.menu_snapshot_model import MenuSnapshotModel


class MenuSnapshotCRUD(BaseCRUD[MenuSnapshotModel]):
    """CRUD operations for MenuSnapshotModel."""

    def __init__(self) -> None:
        """Initialize MenuSnapshotCRUD with MenuSnapshotModel."""
        super().__init__(MenuSnapshotModel)

    async def get_latest(
        self,
        session: AsyncSession,
        branch_id: UUID,
    ) -> MenuSnapshotModel | None:
        """
        Retrieve the most recent snapshot of a branch.

        Args:
            session: Async database session
            branch_id: Branch UUID

        Returns:
            Latest MenuSnapshotModel, None if the branch has none
        """
        stmt = (
            select(MenuSnapshotModel)
            .where(MenuSnapshotModel.branch_id == branch_id)
            .order_by(MenuSnapshotModel.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_branch(
        self,
        session: AsyncSession,
        branch_id: UUID,
        limit: int | None = None,
    ) -> Sequence[MenuSnapshotModel]:
        """
        Retrieve snapshots of a branch, newest first.

        Args:
            session: Async database session
            branch_id: Branch UUID
            limit: Maximum number of snapshots to return

        Returns:
            Sequence of MenuSnapshotModels
        """
        stmt = (
            select(MenuSnapshotModel)
            .where(MenuSnapshotModel.branch_id == branch_id)
            .order_by(MenuSnapshotModel.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


menu_snapshot_crud = MenuSnapshotCRUD()
