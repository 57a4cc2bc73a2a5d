"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(description="Error message")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    success: bool = True
    message: str


class PageResponse(BaseModel, Generic[T]):
    """One page of an offset/limit listing."""

    items: list[T]
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)


class ToggleResponse(BaseModel):
    """Result of flipping a status flag."""

    success: bool = True
    id: str
    value: bool = Field(description="New value of the toggled flag")
