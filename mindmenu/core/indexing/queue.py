"""
In-process indexing queue.

Jobs are grouped by namespace. Each namespace with pending work has exactly
one worker task, so jobs for the same namespace run one at a time in
submission order while different namespaces proceed concurrently. The queue
is not durable; pending jobs are lost on shutdown.

Dependencies: asyncio (stdlib)
System role: Background execution of indexing jobs
"""

import asyncio
import logging
from typing import Awaitable, Callable

from mindmenu.core.indexing.models import IndexingJob

logger = logging.getLogger(__name__)

JobHandler = Callable[[IndexingJob], Awaitable[None]]


class IndexingQueue:
    """Per-namespace FIFO queue with one worker per active namespace."""

    def __init__(self, handler: JobHandler) -> None:
        """
        Args:
            handler: Coroutine function that runs one job
        """
        self._handler = handler
        self._queues: dict[str, asyncio.Queue] = {}
        self._workers: dict[str, asyncio.Task] = {}

    def submit(self, job: IndexingJob) -> None:
        """
        Enqueue a job and make sure its namespace has a worker.

        Must be called from within the running event loop.
        """
        queue = self._queues.setdefault(job.namespace, asyncio.Queue())
        queue.put_nowait(job)

        worker = self._workers.get(job.namespace)
        if worker is None or worker.done():
            self._workers[job.namespace] = asyncio.create_task(
                self._drain(job.namespace),
                name=f"indexing:{job.namespace}",
            )

        logger.info(
            f"{__name__}:submit - Job queued",
            extra={
                "namespace": job.namespace,
                "chatbot_id": str(job.chatbot_id),
                "pending": queue.qsize(),
            },
        )

    def pending(self, namespace: str) -> int:
        """Number of jobs waiting (not yet started) for a namespace."""
        queue = self._queues.get(namespace)
        return queue.qsize() if queue else 0

    async def _drain(self, namespace: str) -> None:
        queue = self._queues[namespace]
        while True:
            job = await queue.get()
            try:
                await self._handler(job)
            except Exception:
                logger.exception(
                    f"{__name__}:_drain - Indexing job raised",
                    extra={"namespace": namespace, "chatbot_id": str(job.chatbot_id)},
                )
            finally:
                queue.task_done()

            # No await between the emptiness check and deregistration
            if queue.empty():
                self._workers.pop(namespace, None)
                self._queues.pop(namespace, None)
                return

    async def join(self) -> None:
        """Wait until every submitted job has finished."""
        while self._workers:
            await asyncio.gather(*list(self._workers.values()), return_exceptions=True)

    async def shutdown(self) -> None:
        """Cancel workers and drop pending jobs."""
        workers = list(self._workers.values())
        for worker in workers:
            worker.cancel()
        await asyncio.gather(*workers, return_exceptions=True)
        self._workers.clear()
        self._queues.clear()
        logger.info(f"{__name__}:shutdown - Indexing queue stopped")
