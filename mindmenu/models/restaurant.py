"""
Restaurant and branch schemas.

Request/response schemas for catalog operations.

Dependencies: pydantic
System role: Restaurant/branch API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateRestaurantRequest(BaseModel):
    """Request schema for registering a restaurant."""

    owner_id: str = Field(min_length=1, description="External owner identifier")
    name: str = Field(min_length=1, max_length=255, description="Restaurant name")
    description: str | None = Field(default=None, description="Optional description")


class RestaurantResponse(BaseModel):
    """Response schema for restaurant operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    owner_id: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


class CreateBranchRequest(BaseModel):
    """Request schema for adding a branch to a restaurant."""

    restaurant_id: uuid.UUID
    name: str = Field(min_length=1, max_length=255, description="Branch name")
    address: str | None = Field(default=None, description="Optional street address")


class BranchResponse(BaseModel):
    """Response schema for branch operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    restaurant_id: uuid.UUID
    name: str
    address: str | None
    has_chatbot: bool
    created_at: datetime
    updated_at: datetime
