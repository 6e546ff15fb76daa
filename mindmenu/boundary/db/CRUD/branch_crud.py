"""
Branch CRUD operations.

Dependencies: sqlalchemy, mindmenu.boundary.db.models.branch_model
System role: Branch persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.base_crud import BaseCRUD
from mindmenu.boundary.db.models.branch_model import BranchModel


class BranchCRUD(BaseCRUD[BranchModel]):
    """CRUD operations for BranchModel."""

    def __init__(self) -> None:
        """Initialize BranchCRUD with BranchModel."""
        super().__init__(BranchModel)

    async def get_by_restaurant_id(
        self,
        session: AsyncSession,
        restaurant_id: UUID,
    ) -> Sequence[BranchModel]:
        """
        Retrieve all branches of a restaurant, oldest first.

        Args:
            session: Async database session
            restaurant_id: Parent restaurant UUID

        Returns:
            Sequence of BranchModels
        """
        stmt = (
            select(BranchModel)
            .where(BranchModel.restaurant_id == restaurant_id)
            .order_by(BranchModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def set_has_chatbot(
        self,
        session: AsyncSession,
        id: UUID,
        has_chatbot: bool = True,
    ) -> BranchModel | None:
        """Flag whether the branch has a working chatbot."""
        return await self.update_by_id(session, id, has_chatbot=has_chatbot)


branch_crud = BranchCRUD()
