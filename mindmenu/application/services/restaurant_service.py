"""
Restaurant and branch service orchestrator.

Coordinates catalog operations: registering restaurants and their branches.

Dependencies: mindmenu.boundary.db.CRUD
System role: Catalog use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.branch_crud import branch_crud
from mindmenu.boundary.db.CRUD.restaurant_crud import restaurant_crud
from mindmenu.boundary.db.models import BranchModel, RestaurantModel
from mindmenu.core.exceptions import BranchNotFoundError, RestaurantNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class RestaurantService:
    """Restaurant and branch service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize restaurant service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_restaurant(
        self,
        owner_id: str,
        name: str,
        description: str | None = None,
    ) -> RestaurantModel:
        """
        Register a restaurant.

        Raises:
            ValidationError: If owner_id or name is blank
        """
        if not owner_id.strip():
            raise ValidationError("owner_id is required", field="owner_id")
        if not name.strip():
            raise ValidationError("name is required", field="name")

        restaurant = await restaurant_crud.create(
            self.db,
            owner_id=owner_id,
            name=name,
            description=description,
        )
        await self.db.commit()
        logger.info(
            f"{__name__}:create_restaurant - Restaurant created",
            extra={"restaurant_id": str(restaurant.id), "owner_id": owner_id},
        )
        return restaurant

    async def get_restaurant(self, restaurant_id: UUID) -> RestaurantModel:
        """
        Get restaurant by ID.

        Raises:
            RestaurantNotFoundError: If restaurant does not exist
        """
        restaurant = await restaurant_crud.get_by_id(self.db, restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)
        return restaurant

    async def create_branch(
        self,
        restaurant_id: UUID,
        name: str,
        address: str | None = None,
    ) -> BranchModel:
        """
        Add a branch to an existing restaurant.

        Raises:
            RestaurantNotFoundError: If restaurant does not exist
            ValidationError: If name is blank
        """
        if not name.strip():
            raise ValidationError("name is required", field="name")
        await self.get_restaurant(restaurant_id)

        branch = await branch_crud.create(
            self.db,
            restaurant_id=restaurant_id,
            name=name,
            address=address,
        )
        await self.db.commit()
        logger.info(
            f"{__name__}:create_branch - Branch created",
            extra={"branch_id": str(branch.id), "restaurant_id": str(restaurant_id)},
        )
        return branch

    async def get_branch(self, branch_id: UUID) -> BranchModel:
        """
        Get branch by ID.

        Raises:
            BranchNotFoundError: If branch does not exist
        """
        branch = await branch_crud.get_by_id(self.db, branch_id)
        if branch is None:
            raise BranchNotFoundError(branch_id)
        return branch

    async def list_restaurant_branches(self, restaurant_id: UUID) -> Sequence[BranchModel]:
        """
        List branches of a restaurant.

        Raises:
            RestaurantNotFoundError: If restaurant does not exist
        """
        await self.get_restaurant(restaurant_id)
        return await branch_crud.get_by_restaurant_id(self.db, restaurant_id)

    async def list_branches(self, limit: int | None = None, offset: int = 0) -> Sequence[BranchModel]:
        """List all branches."""
        return await branch_crud.get_all(self.db, limit=limit, offset=offset)
