"""
Integration tests for restaurant, branch and menu snapshot CRUD.

Runs against in-memory SQLite through aiosqlite.

System role: Verification of catalog persistence
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from mindmenu.boundary.db.CRUD.branch_crud import branch_crud
from mindmenu.boundary.db.CRUD.menu_snapshot_crud import menu_snapshot_crud
from mindmenu.boundary.db.CRUD.restaurant_crud import restaurant_crud


class TestRestaurantCRUD:
    """Test suite for RestaurantCRUD."""

    @pytest.mark.asyncio
    async def test_create_should_assign_id_and_timestamps(self, test_async_db) -> None:
        """Test created restaurants get a UUID and timestamps."""
        restaurant = await restaurant_crud.create(test_async_db, owner_id="owner-1", name="Golden Dragon")

        assert restaurant.id is not None
        assert restaurant.created_at is not None
        assert await restaurant_crud.exists(test_async_db, restaurant.id)

    @pytest.mark.asyncio
    async def test_get_by_owner_should_filter_by_owner(self, test_async_db) -> None:
        """Test only the owner's restaurants are returned."""
        await restaurant_crud.create(test_async_db, owner_id="owner-1", name="A")
        await restaurant_crud.create(test_async_db, owner_id="owner-2", name="B")

        restaurants = await restaurant_crud.get_by_owner(test_async_db, "owner-1")

        assert [r.name for r in restaurants] == ["A"]

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_when_missing(self, test_async_db) -> None:
        """Test unknown IDs return None."""
        assert await restaurant_crud.get_by_id(test_async_db, uuid4()) is None


class TestBranchCRUD:
    """Test suite for BranchCRUD."""

    @pytest.mark.asyncio
    async def test_get_by_restaurant_id_should_list_its_branches(self, test_async_db, sample_branch) -> None:
        """Test branches are listed per restaurant."""
        branches = await branch_crud.get_by_restaurant_id(test_async_db, sample_branch.restaurant_id)

        assert [b.id for b in branches] == [sample_branch.id]
        assert branches[0].has_chatbot is False

    @pytest.mark.asyncio
    async def test_set_has_chatbot_should_flag_branch(self, test_async_db, sample_branch) -> None:
        """Test the chatbot flag is updated."""
        updated = await branch_crud.set_has_chatbot(test_async_db, sample_branch.id, True)

        assert updated.has_chatbot is True


class TestMenuSnapshotCRUD:
    """Test suite for MenuSnapshotCRUD."""

    @pytest.mark.asyncio
    async def test_get_latest_should_return_newest_snapshot(self, test_async_db, sample_branch) -> None:
        """Test the most recent snapshot wins and listing is newest first."""
        # Arrange
        now = datetime.now(timezone.utc)
        older = await menu_snapshot_crud.create(
            test_async_db,
            branch_id=sample_branch.id,
            content={"hours": "9-5"},
            content_hash="h1",
            created_at=now - timedelta(hours=1),
        )
        newer = await menu_snapshot_crud.create(
            test_async_db,
            branch_id=sample_branch.id,
            content={"hours": "10-6"},
            content_hash="h2",
            created_at=now,
        )

        # Act
        latest = await menu_snapshot_crud.get_latest(test_async_db, sample_branch.id)
        listed = await menu_snapshot_crud.list_for_branch(test_async_db, sample_branch.id)

        # Assert
        assert latest.id == newer.id
        assert latest.content == {"hours": "10-6"}
        assert [s.id for s in listed] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_get_latest_should_return_none_without_snapshots(self, test_async_db, sample_branch) -> None:
        """Test a branch without snapshots has no latest."""
        assert await menu_snapshot_crud.get_latest(test_async_db, sample_branch.id) is None
