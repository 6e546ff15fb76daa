"""
RAG query engine.

Embeds a question, retrieves namespace context, composes the prompt and
generates the answer. Degrades instead of failing when there is nothing to
answer from or the generation backend fails.

Dependencies: mindmenu.boundary.gateways, mindmenu.core.rag
System role: Query-time orchestration of the RAG flow
"""

import logging
from typing import Sequence

from mindmenu.boundary.gateways.embeddings import EmbeddingGateway
from mindmenu.boundary.gateways.generation import GenerationGateway
from mindmenu.core.exceptions import GenerationError
from mindmenu.core.rag.models import ConversationTurn, QueryResult
from mindmenu.core.rag.prompt_composer import (
    HISTORY_WINDOW,
    compose_prompt,
    compose_prompt_with_history,
)
from mindmenu.core.rag.retriever import Retriever

logger = logging.getLogger(__name__)

NO_CONTEXT_RESPONSE = "I couldn't find any relevant information to answer your question."
GENERATION_FAILED_PREFIX = (
    "I found some information but couldn't generate a proper response. Here's what I found: "
)


def fallback_response(contexts: Sequence[str]) -> str:
    """Answer used when generation fails: the raw context joined by '; '."""
    return GENERATION_FAILED_PREFIX + "; ".join(contexts)


class RAGQueryEngine:
    """Answer questions against one branch namespace."""

    def __init__(
        self,
        embedder: EmbeddingGateway,
        retriever: Retriever,
        generator: GenerationGateway,
        history_window: int = HISTORY_WINDOW,
    ) -> None:
        self.embedder = embedder
        self.retriever = retriever
        self.generator = generator
        self.history_window = history_window

    def _generate(self, prompt: str, contexts: list[str], namespace: str) -> str:
        try:
            return self.generator.generate(prompt)
        except GenerationError as e:
            logger.warning(
                f"{__name__}:_generate - Generation failed, returning raw context: {e.message}",
                extra={"namespace": namespace, "context_count": len(contexts)},
            )
            return fallback_response(contexts)

    def answer(self, question: str, namespace: str) -> QueryResult:
        """
        Answer a question without conversation history.

        Raises:
            EmbeddingError: Question could not be embedded
            RetrievalError: Similarity query failed
        """
        embedding = self.embedder.embed(question)
        retrieval = self.retriever.retrieve(embedding, namespace)

        if retrieval.contexts:
            prompt = compose_prompt(question, retrieval.contexts)
            response = self._generate(prompt, retrieval.contexts, namespace)
        else:
            response = NO_CONTEXT_RESPONSE

        return QueryResult(
            response=response,
            context=retrieval.contexts,
            debug={
                "namespace": namespace,
                "matches": retrieval.matches,
                "context_count": len(retrieval.contexts),
            },
        )

    def answer_with_history(
        self,
        question: str,
        namespace: str,
        history: Sequence[ConversationTurn],
        language: str = "en",
    ) -> QueryResult:
        """
        Answer a question using prior turns and a language directive.

        Args:
            question: Current user question
            namespace: Branch namespace
            history: Prior turns in chronological order
            language: Requested answer language code

        Raises:
            EmbeddingError: Question could not be embedded
            RetrievalError: Similarity query failed
        """
        embedding = self.embedder.embed(question)
        retrieval = self.retriever.retrieve(embedding, namespace)

        if retrieval.contexts:
            prompt = compose_prompt_with_history(
                question,
                retrieval.contexts,
                history,
                language=language,
                window=self.history_window,
            )
            response = self._generate(prompt, retrieval.contexts, namespace)
        else:
            response = NO_CONTEXT_RESPONSE

        return QueryResult(
            response=response,
            context=retrieval.contexts,
            debug={
                "namespace": namespace,
                "matches": retrieval.matches,
                "context_count": len(retrieval.contexts),
                "history_count": len(history),
                "language": language,
            },
        )
