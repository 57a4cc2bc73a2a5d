"""
Blog domain models and schemas.

Dependencies: pydantic
System role: Blog API contracts
"""

import uuid
import datetime as dt

from pydantic import BaseModel

from chaseplus_backend.models.common import PageResponse


class BlogResponse(BaseModel):
    """Response schema for blog operations."""

    id: uuid.UUID
    title: str
    category: str
    date: dt.date
    description: str
    content: str
    image_url: str
    meta_title: str
    meta_description: str
    author: str
    is_published: bool
    views: int
    created_at: dt.datetime
    updated_at: dt.datetime


BlogPageResponse = PageResponse[BlogResponse]
