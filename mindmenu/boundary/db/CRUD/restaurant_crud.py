"""
Restaurant CRUD operations.

Dependencies: sqlalchemy, mindmenu.boundary.db.models.restaurant_model
System role: Restaurant persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.base_crud import BaseCRUD
from mindmenu.boundary.db.models.restaurant_model import RestaurantModel


class RestaurantCRUD(BaseCRUD[RestaurantModel]):
    """CRUD operations for RestaurantModel."""

    def __init__(self) -> None:
        """Initialize RestaurantCRUD with RestaurantModel."""
        super().__init__(RestaurantModel)

    async def get_by_owner(
        self,
        session: AsyncSession,
        owner_id: str,
    ) -> Sequence[RestaurantModel]:
        """
        Retrieve restaurants belonging to an owner, oldest first.

        Args:
            session: Async database session
            owner_id: External owner identifier

        Returns:
            Sequence of RestaurantModels
        """
        stmt = (
            select(RestaurantModel)
            .where(RestaurantModel.owner_id == owner_id)
            .order_by(RestaurantModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


restaurant_crud = RestaurantCRUD()
