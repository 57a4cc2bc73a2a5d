"""
Admin authentication endpoints.

Routes: POST /auth/login, POST /auth/logout, GET /auth/me

A single admin credential is configured through AuthSettings. A
successful login stores the username in the signed session cookie,
which require_admin checks on every admin route.

Dependencies: fastapi, starlette sessions, chaseplus_backend.configs
System role: Admin auth gate HTTP API
"""

import hmac
import logging

from fastapi import APIRouter, Depends, Request

from chaseplus_backend.api.deps.dependencies import ADMIN_SESSION_KEY, require_admin
from chaseplus_backend.api.routers.error_handling import handle_content_errors
from chaseplus_backend.configs import get_settings
from chaseplus_backend.core.exceptions import AuthenticationError
from chaseplus_backend.models.auth import AdminResponse, LoginRequest
from chaseplus_backend.models.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _credentials_match(username: str, password: str) -> bool:
    auth = get_settings().auth
    user_ok = hmac.compare_digest(username.encode(), auth.username.encode())
    password_ok = hmac.compare_digest(password.encode(), auth.password.encode())
    return user_ok and password_ok


@router.post("/login", response_model=AdminResponse)
@handle_content_errors
async def login(request: Request, credentials: LoginRequest) -> AdminResponse:
    """
    Start an admin session.

    Raises:
        HTTPException(401): Wrong username or password
    """
    if not _credentials_match(credentials.username, credentials.password):
        logger.warning("Admin login rejected", extra={"username": credentials.username})
        raise AuthenticationError("Invalid username or password")

    request.session[ADMIN_SESSION_KEY] = credentials.username
    logger.info("Admin logged in", extra={"username": credentials.username})
    return AdminResponse(username=credentials.username)


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request) -> MessageResponse:
    """End the admin session."""
    request.session.clear()
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=AdminResponse)
async def me(username: str = Depends(require_admin)) -> AdminResponse:
    """Return the logged-in admin."""
    return AdminResponse(username=username)
