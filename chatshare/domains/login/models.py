"""
Login Models - Data types for the login domain.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class LoginState(str, Enum):
    """Which branch of the login flow produced a redirect."""

    AWAITING_CODE = "awaiting_code"
    COMPLETED = "completed"
    FAILED = "failed"


class LoginRedirect(BaseModel):
    """302 redirect produced by the login flow."""

    location: str
    state: LoginState
    set_cookies: list[str] = Field(default_factory=list)
    status_code: int = 302
