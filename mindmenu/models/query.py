"""
Query and chat history schemas.

Dependencies: pydantic
System role: Knowledge-base query API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """Request schema for a single question."""

    question: str = Field(min_length=1, description="User question")


class QueryWithHistoryRequest(BaseModel):
    """Request schema for a question within a chat session."""

    question: str = Field(min_length=1, description="User question")
    session_id: str | None = Field(default=None, description="Chat session; a new one is created if omitted")
    language: str | None = Field(default=None, description="Answer language code (en, zh, ja, ko)")


class QueryResponse(BaseModel):
    """Answer, the context it was based on and retrieval diagnostics."""

    response: str
    context: list[str]
    debug: dict[str, Any]
    session_id: str | None = None


class ChatTurnResponse(BaseModel):
    """One stored chat turn."""

    model_config = ConfigDict(from_attributes=True)

    query: str
    response: str
    language: str
    timestamp: datetime


class ChatHistoryResponse(BaseModel):
    """Chronological chat turns of a session."""

    session_id: str
    turns: list[ChatTurnResponse]
    total: int
