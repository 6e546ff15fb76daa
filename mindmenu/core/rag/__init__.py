"""
Query-time RAG flow: retrieval, prompt composition and answering.
"""

from mindmenu.core.rag.models import ConversationTurn, QueryResult, RetrievalResult
from mindmenu.core.rag.prompt_composer import (
    LANGUAGE_INSTRUCTIONS,
    build_conversation_context,
    compose_prompt,
    compose_prompt_with_history,
)
from mindmenu.core.rag.query_engine import (
    NO_CONTEXT_RESPONSE,
    RAGQueryEngine,
    fallback_response,
)
from mindmenu.core.rag.retriever import Retriever

__all__ = [
    "ConversationTurn",
    "QueryResult",
    "RetrievalResult",
    "LANGUAGE_INSTRUCTIONS",
    "build_conversation_context",
    "compose_prompt",
    "compose_prompt_with_history",
    "NO_CONTEXT_RESPONSE",
    "RAGQueryEngine",
    "fallback_response",
    "Retriever",
]
