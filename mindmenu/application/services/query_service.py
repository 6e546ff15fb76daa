"""
Query service orchestrator.

Resolves a branch to its vector namespace and answers questions through the
RAG query engine, reading and appending chat history for session queries.

Dependencies: fastapi.concurrency, mindmenu.core.rag, mindmenu.application.adapters
System role: Knowledge-base query use case orchestration
"""

import logging
import uuid
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from mindmenu.application.adapters.chat_history_adapter import ChatHistoryAdapter
from mindmenu.boundary.db.CRUD.branch_crud import branch_crud
from mindmenu.core.exceptions import BranchNotFoundError, ValidationError
from mindmenu.core.knowledge.identity import build_namespace
from mindmenu.core.rag.models import QueryResult
from mindmenu.core.rag.query_engine import RAGQueryEngine

logger = logging.getLogger(__name__)


class QueryService:
    """Query service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        query_engine: RAGQueryEngine,
        history_window: int = 5,
        default_language: str = "en",
    ) -> None:
        """
        Args:
            db: Async SQLAlchemy session
            query_engine: RAG query engine
            history_window: Turns of history read for each question
            default_language: Language used when a request gives none
        """
        self.db = db
        self.query_engine = query_engine
        self.history_window = history_window
        self.default_language = default_language

    async def _namespace(self, branch_id: UUID) -> str:
        branch = await branch_crud.get_by_id(self.db, branch_id)
        if branch is None:
            raise BranchNotFoundError(branch_id)
        return build_namespace(str(branch.restaurant_id), branch.name)

    @staticmethod
    def _require_question(question: str) -> str:
        if not question or not question.strip():
            raise ValidationError("question is required", field="question")
        return question

    async def query(self, branch_id: UUID, question: str) -> QueryResult:
        """
        Answer a question against a branch knowledge base.

        Raises:
            ValidationError: If question is blank
            BranchNotFoundError: If branch does not exist
            EmbeddingError, RetrievalError: Provider failures
        """
        self._require_question(question)
        namespace = await self._namespace(branch_id)
        return await run_in_threadpool(self.query_engine.answer, question, namespace)

    async def query_with_history(
        self,
        branch_id: UUID,
        question: str,
        session_id: str | None = None,
        language: str | None = None,
    ) -> tuple[QueryResult, str]:
        """
        Answer a question within a chat session and store the turn.

        Args:
            branch_id: Branch UUID
            question: User question
            session_id: Chat session key (generated when omitted)
            language: Answer language code

        Returns:
            tuple[QueryResult, str]: Answer and the session ID it was stored under

        Raises:
            ValidationError: If question is blank
            BranchNotFoundError: If branch does not exist
            EmbeddingError, RetrievalError: Provider failures
        """
        self._require_question(question)
        namespace = await self._namespace(branch_id)
        session_id = session_id or str(uuid.uuid4())
        language = language or self.default_language

        history = ChatHistoryAdapter(session_id=session_id, db=self.db)
        turns = await history.get_recent_turns(limit=self.history_window)

        result = await run_in_threadpool(
            self.query_engine.answer_with_history,
            question,
            namespace,
            turns,
            language,
        )

        await history.add_turn(
            query=question,
            response=result.response,
            language=language,
            branch_id=branch_id,
        )
        await self.db.commit()

        logger.info(
            f"{__name__}:query_with_history - Answered question",
            extra={
                "branch_id": str(branch_id),
                "session_id": session_id,
                "history_count": len(turns),
                "context_count": len(result.context),
            },
        )
        return result, session_id
