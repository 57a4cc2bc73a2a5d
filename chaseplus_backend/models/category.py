"""
Category domain models and schemas.

Request/response schemas for category operations.

Dependencies: pydantic
System role: Category API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateCategoryRequest(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique category name")
    description: str | None = Field(None, max_length=4096, description="Category description")


class UpdateCategoryRequest(BaseModel):
    """Request schema for updating a category."""

    name: str | None = Field(None, min_length=1, max_length=255, description="New category name")
    description: str | None = Field(None, max_length=4096, description="New description")


class CategoryResponse(BaseModel):
    """Response schema for category operations."""

    id: uuid.UUID
    name: str
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
