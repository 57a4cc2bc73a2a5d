"""
Admin authentication settings.

Single configured admin credential and session cookie parameters.

Dependencies: pydantic_settings
System role: Auth gate configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Admin login and session cookie configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ADMIN_",
        case_sensitive=False,
        extra="ignore",
    )

    username: str = Field(default="admin", description="Admin login name")
    password: str = Field(default="change-me", description="Admin login password")
    session_secret: str = Field(
        default="dev-session-secret",
        description="Secret used to sign the session cookie",
    )
    session_max_age: int = Field(
        default=60 * 60 * 24,
        description="Session cookie lifetime in seconds (default 1 day)",
    )
    https_only: bool = Field(default=False, description="Mark the session cookie Secure")
