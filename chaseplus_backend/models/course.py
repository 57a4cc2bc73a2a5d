"""
Course domain models and schemas.

Response schemas for course operations. Course writes arrive as
multipart forms, so there is no JSON request body model.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from chaseplus_backend.models.common import PageResponse


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    id: uuid.UUID
    title: str
    description: str
    category: str = Field(description="Category name")
    image: str = Field(description="Public image URL")
    duration: str | None = None
    highlights: list[str]
    what_youll_learn: list[str]
    career_opportunities: list[str]
    why_choose_this_course: list[str]
    price: float
    offer_price: float | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CourseSummary(BaseModel):
    """Course reference used in category listings."""

    id: uuid.UUID
    title: str


class CoursePageResponse(PageResponse[CourseResponse]):
    """Paged course listing with the applied search term."""

    search: str = ""
