"""
Indexing job runner.

Runs one queued indexing job in the background with its own database
session: chunk -> embed -> sync (optionally prune) -> record chatbot state.
Failures never propagate to the queue; they are logged and recorded on the
chatbot as status=error with the message.

Dependencies: fastapi.concurrency, mindmenu.core, mindmenu.boundary
System role: Background execution of knowledge indexing
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import async_sessionmaker

from mindmenu.boundary.db.CRUD.branch_crud import branch_crud
from mindmenu.boundary.db.CRUD.chatbot_crud import chatbot_crud
from mindmenu.boundary.gateways.embeddings import EmbeddingGateway
from mindmenu.core.exceptions import MindMenuException
from mindmenu.core.indexing.models import IndexingJob
from mindmenu.core.knowledge.chunker import chunk_content
from mindmenu.core.knowledge.models import SyncResult
from mindmenu.core.knowledge.synchronizer import VectorStoreSynchronizer
from mindmenu.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


def error_message(error: Exception) -> str:
    if isinstance(error, MindMenuException):
        return error.message
    return str(error) or type(error).__name__


class IndexingJobRunner:
    """Executes IndexingJobs; used as the IndexingQueue handler."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        embedder: EmbeddingGateway,
        synchronizer: VectorStoreSynchronizer,
    ) -> None:
        """
        Args:
            session_factory: Factory for the job's own database session
            embedder: Embedding gateway for chunk texts
            synchronizer: Namespace synchronizer
        """
        self.session_factory = session_factory
        self.embedder = embedder
        self.synchronizer = synchronizer

    async def index(self, job: IndexingJob) -> SyncResult:
        """
        Chunk and synchronize a job's document (no database writes).

        Only new and updated chunks are embedded, after the synchronizer has
        compared content hashes with the stored vectors.

        Raises:
            ContentParseError: Document is not a JSON object
            EmbeddingError: Any chunk failed to embed
            VectorStoreError: Fetch/upsert/prune failed
        """
        chunking = chunk_content(
            job.content,
            restaurant_id=str(job.restaurant_id),
            branch_id=str(job.branch_id),
        )
        return await run_in_threadpool(
            self.synchronizer.sync,
            job.namespace,
            chunking.chunks,
            job.prune,
            self.embedder.embed_many,
        )

    async def __call__(self, job: IndexingJob) -> None:
        await self.run(job)

    async def run(self, job: IndexingJob) -> None:
        """Run a job and record its outcome on the chatbot."""
        logger.info(
            "Starting background indexing",
            extra={
                "chatbot_id": str(job.chatbot_id),
                "branch_id": str(job.branch_id),
                "namespace": job.namespace,
                "prune": job.prune,
            },
        )

        async with self.session_factory() as db:
            try:
                await chatbot_crud.mark_building(db, job.chatbot_id)
                await db.commit()

                result = await self.index(job)

                await chatbot_crud.mark_active(db, job.chatbot_id, job.document_hash)
                await branch_crud.set_has_chatbot(db, job.branch_id, True)
                await db.commit()

                log_with_context(
                    logger,
                    logging.INFO,
                    "Indexing completed",
                    chatbot_id=job.chatbot_id,
                    namespace=job.namespace,
                    new=result.new,
                    updated=result.updated,
                    unchanged=result.unchanged,
                    pruned=len(result.pruned),
                )

            except Exception as e:
                log_exception_with_context(
                    logger,
                    "Indexing failed",
                    e,
                    chatbot_id=job.chatbot_id,
                    namespace=job.namespace,
                )
                await db.rollback()
                try:
                    await chatbot_crud.mark_error(db, job.chatbot_id, error_message(e))
                    await db.commit()
                except Exception as inner_e:
                    logger.exception(
                        "Failed to record indexing failure",
                        extra={"chatbot_id": str(job.chatbot_id), "inner_error": str(inner_e)},
                    )
