"""
Chatbot schemas.

Request/response schemas for chatbot creation, reindexing and vector
maintenance.

Dependencies: pydantic
System role: Chatbot API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mindmenu.boundary.db.models.chatbot_model import ChatbotStatus


class CreateChatbotRequest(BaseModel):
    """Request schema for creating (or rebuilding) a branch chatbot."""

    branch_id: uuid.UUID
    content: Any = Field(description="Knowledge document: JSON object or JSON text")


class ReindexChatbotRequest(BaseModel):
    """Request schema for reindexing; content defaults to the latest snapshot."""

    content: Any | None = Field(default=None, description="Knowledge document override")
    prune: bool = Field(default=False, description="Delete vectors missing from the new document")


class ChatbotAcceptedResponse(BaseModel):
    """Response returned when an indexing job has been queued."""

    message: str
    chatbot_id: uuid.UUID


class ChatbotResponse(BaseModel):
    """Chatbot status."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    branch_id: uuid.UUID
    namespace: str
    status: ChatbotStatus
    content_hash: str | None
    version: int
    last_error: str | None
    created_at: datetime
    updated_at: datetime


class DeleteVectorsRequest(BaseModel):
    """Request schema for deleting explicit vector IDs."""

    ids: list[str] = Field(min_length=1, description="Vector IDs to delete")


class DeleteVectorsResponse(BaseModel):
    """Response schema for vector deletion."""

    namespace: str
    deleted: int
