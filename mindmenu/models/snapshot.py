"""
Menu snapshot schemas.

Dependencies: pydantic
System role: Menu snapshot API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateSnapshotRequest(BaseModel):
    """Request schema for appending a menu snapshot."""

    content: dict[str, Any] = Field(description="Knowledge document (JSON object)")
    author: str | None = Field(default=None, description="Who made the change")
    notes: str | None = Field(default=None, description="Change notes")


class SnapshotResponse(BaseModel):
    """Response schema for snapshot operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    branch_id: uuid.UUID
    content: dict[str, Any]
    content_hash: str
    author: str | None
    notes: str | None
    created_at: datetime
