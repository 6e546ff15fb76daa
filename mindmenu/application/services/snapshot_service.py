"""
Menu snapshot service orchestrator.

Snapshots are append-only versions of a branch's knowledge document; the
latest one is the default source for reindexing.

Dependencies: mindmenu.boundary.db.CRUD, mindmenu.core.knowledge
System role: Knowledge document versioning
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.branch_crud import branch_crud
from mindmenu.boundary.db.CRUD.menu_snapshot_crud import menu_snapshot_crud
from mindmenu.boundary.db.models import MenuSnapshotModel
from mindmenu.core.exceptions import BranchNotFoundError, SnapshotNotFoundError
from mindmenu.core.knowledge.chunker import parse_content
from mindmenu.core.knowledge.identity import compute_document_hash

logger = logging.getLogger(__name__)


class SnapshotService:
    """Menu snapshot service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _require_branch(self, branch_id: UUID) -> None:
        if not await branch_crud.exists(self.db, branch_id):
            raise BranchNotFoundError(branch_id)

    async def create_snapshot(
        self,
        branch_id: UUID,
        content: Any,
        author: str | None = None,
        notes: str | None = None,
    ) -> MenuSnapshotModel:
        """
        Append a snapshot of a branch knowledge document.

        Raises:
            BranchNotFoundError: If branch does not exist
            ContentParseError: If content is not a JSON object
        """
        await self._require_branch(branch_id)
        document = parse_content(content)

        snapshot = await menu_snapshot_crud.create(
            self.db,
            branch_id=branch_id,
            content=document,
            content_hash=compute_document_hash(document),
            author=author,
            notes=notes,
        )
        await self.db.commit()
        logger.info(
            f"{__name__}:create_snapshot - Snapshot stored",
            extra={"branch_id": str(branch_id), "snapshot_id": str(snapshot.id)},
        )
        return snapshot

    async def list_snapshots(self, branch_id: UUID, limit: int | None = None) -> Sequence[MenuSnapshotModel]:
        """
        List snapshots of a branch, newest first.

        Raises:
            BranchNotFoundError: If branch does not exist
        """
        await self._require_branch(branch_id)
        return await menu_snapshot_crud.list_for_branch(self.db, branch_id, limit=limit)

    async def get_latest_snapshot(self, branch_id: UUID) -> MenuSnapshotModel:
        """
        Latest snapshot of a branch.

        Raises:
            BranchNotFoundError: If branch does not exist
            SnapshotNotFoundError: If the branch has no snapshot
        """
        await self._require_branch(branch_id)
        snapshot = await menu_snapshot_crud.get_latest(self.db, branch_id)
        if snapshot is None:
            raise SnapshotNotFoundError(branch_id)
        return snapshot
