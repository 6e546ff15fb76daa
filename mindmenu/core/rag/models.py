"""
RAG query domain models.

Dependencies: pydantic
System role: Data structures for retrieval, prompting and answers
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ConversationTurn(BaseModel):
    """One prior question/answer pair of a session."""

    query: str
    response: str
    language: str = "en"
    timestamp: datetime | None = None


class RetrievalResult(BaseModel):
    """Context texts resolved from a similarity query, in rank order."""

    contexts: list[str] = Field(default_factory=list)
    match_ids: list[str] = Field(default_factory=list)

    @property
    def matches(self) -> int:
        return len(self.match_ids)


class QueryResult(BaseModel):
    """Answer returned to the caller together with its context and diagnostics."""

    response: str
    context: list[str] = Field(default_factory=list)
    debug: dict[str, Any] = Field(default_factory=dict)
