"""
Chatbot service orchestrator.

Creates branch chatbots and queues indexing/reindexing jobs. Requests return
as soon as the job is queued; progress is observed through chatbot status.

Dependencies: mindmenu.boundary.db.CRUD, mindmenu.core.indexing, mindmenu.core.knowledge
System role: Chatbot lifecycle use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.boundary.db.CRUD.branch_crud import branch_crud
from mindmenu.boundary.db.CRUD.chatbot_crud import chatbot_crud
from mindmenu.boundary.db.CRUD.menu_snapshot_crud import menu_snapshot_crud
from mindmenu.boundary.db.CRUD.restaurant_crud import restaurant_crud
from mindmenu.boundary.db.models import BranchModel, ChatbotModel, ChatbotStatus
from mindmenu.core.exceptions import (
    BranchNotFoundError,
    ChatbotNotFoundError,
    RestaurantNotFoundError,
    SnapshotNotFoundError,
    ValidationError,
)
from mindmenu.core.indexing.models import IndexingJob
from mindmenu.core.indexing.queue import IndexingQueue
from mindmenu.core.knowledge.chunker import parse_content
from mindmenu.core.knowledge.identity import build_namespace, compute_document_hash
from mindmenu.core.knowledge.synchronizer import VectorStoreSynchronizer

logger = logging.getLogger(__name__)


class ChatbotService:
    """Chatbot service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        indexing_queue: IndexingQueue,
        synchronizer: VectorStoreSynchronizer,
    ) -> None:
        """
        Args:
            db: Async SQLAlchemy session
            indexing_queue: Queue that runs indexing jobs in the background
            synchronizer: Namespace synchronizer for explicit deletions
        """
        self.db = db
        self.indexing_queue = indexing_queue
        self.synchronizer = synchronizer

    async def _branch_namespace(self, branch: BranchModel) -> str:
        restaurant = await restaurant_crud.get_by_id(self.db, branch.restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(branch.restaurant_id)
        return build_namespace(str(restaurant.id), branch.name)

    def _submit(self, chatbot: ChatbotModel, branch: BranchModel, document: dict, prune: bool) -> None:
        self.indexing_queue.submit(
            IndexingJob(
                chatbot_id=chatbot.id,
                branch_id=branch.id,
                restaurant_id=branch.restaurant_id,
                namespace=chatbot.namespace,
                content=document,
                document_hash=compute_document_hash(document),
                prune=prune,
            )
        )

    async def create_chatbot(self, branch_id: UUID, content: Any) -> ChatbotModel:
        """
        Create the branch chatbot (or rebuild the existing one) and queue indexing.

        Steps:
        1. Validate branch and its restaurant exist
        2. Validate content is a JSON object
        3. Create chatbot (or reuse the branch's) in BUILDING state
        4. Queue the indexing job

        Raises:
            BranchNotFoundError: If branch does not exist
            RestaurantNotFoundError: If the branch's restaurant does not exist
            ContentParseError: If content is not a JSON object
        """
        branch = await branch_crud.get_by_id(self.db, branch_id)
        if branch is None:
            raise BranchNotFoundError(branch_id)
        namespace = await self._branch_namespace(branch)
        document = parse_content(content)

        chatbot = await chatbot_crud.get_by_branch_id(self.db, branch_id)
        if chatbot is None:
            chatbot = await chatbot_crud.create(
                self.db,
                branch_id=branch_id,
                namespace=namespace,
                status=ChatbotStatus.BUILDING,
            )
        else:
            chatbot = await chatbot_crud.mark_building(self.db, chatbot.id)
        await self.db.commit()

        self._submit(chatbot, branch, document, prune=False)
        logger.info(
            f"{__name__}:create_chatbot - Chatbot creation started",
            extra={"chatbot_id": str(chatbot.id), "branch_id": str(branch_id), "namespace": namespace},
        )
        return chatbot

    async def reindex_chatbot(
        self,
        chatbot_id: UUID,
        content: Any | None = None,
        prune: bool = False,
    ) -> ChatbotModel:
        """
        Queue a reindex of a chatbot's knowledge base.

        Args:
            chatbot_id: Chatbot UUID
            content: Replacement document; defaults to the branch's latest snapshot
            prune: Delete stored vectors absent from the document after sync

        Raises:
            ChatbotNotFoundError: If chatbot does not exist
            BranchNotFoundError: If the chatbot's branch does not exist
            SnapshotNotFoundError: If no content is given and the branch has no snapshot
            ContentParseError: If content is not a JSON object
        """
        chatbot = await self.get_chatbot(chatbot_id)
        branch = await branch_crud.get_by_id(self.db, chatbot.branch_id)
        if branch is None:
            raise BranchNotFoundError(chatbot.branch_id)

        if content is None:
            snapshot = await menu_snapshot_crud.get_latest(self.db, branch.id)
            if snapshot is None:
                raise SnapshotNotFoundError(branch.id)
            document = dict(snapshot.content)
        else:
            document = parse_content(content)

        chatbot = await chatbot_crud.mark_building(self.db, chatbot.id)
        await self.db.commit()

        self._submit(chatbot, branch, document, prune=prune)
        logger.info(
            f"{__name__}:reindex_chatbot - Reindex queued",
            extra={"chatbot_id": str(chatbot_id), "namespace": chatbot.namespace, "prune": prune},
        )
        return chatbot

    async def get_chatbot(self, chatbot_id: UUID) -> ChatbotModel:
        """
        Get chatbot by ID.

        Raises:
            ChatbotNotFoundError: If chatbot does not exist
        """
        chatbot = await chatbot_crud.get_by_id(self.db, chatbot_id)
        if chatbot is None:
            raise ChatbotNotFoundError(chatbot_id)
        return chatbot

    async def delete_vectors(self, chatbot_id: UUID, ids: list[str]) -> tuple[str, int]:
        """
        Delete explicit vector IDs from a chatbot's namespace.

        Returns:
            tuple[str, int]: (namespace, number of IDs submitted for deletion)

        Raises:
            ChatbotNotFoundError: If chatbot does not exist
            ValidationError: If no IDs are given
            VectorStoreError: If the store rejects a batch
        """
        if not ids:
            raise ValidationError("At least one vector ID is required", field="ids")
        chatbot = await self.get_chatbot(chatbot_id)
        deleted = await run_in_threadpool(self.synchronizer.delete_vectors, chatbot.namespace, ids)
        return chatbot.namespace, deleted
