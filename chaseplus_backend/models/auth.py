"""
Admin authentication schemas.

Dependencies: pydantic
System role: Auth API contracts
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Admin login credentials."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminResponse(BaseModel):
    """Currently authenticated admin."""

    username: str
    authenticated: bool = True
