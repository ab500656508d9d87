"""
Token Models - Data types for the token domain.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """Verified contents of a session token."""

    subject: str
    claims: dict[str, Any] = Field(default_factory=dict)
    issued_at: datetime
    expires_at: datetime


class AccessClaims(BaseModel):
    """Claim shape of the HTTP-only access token."""

    model_config = ConfigDict(extra="forbid")

    # Optional so a missing role is reported by the role check, not as malformed
    role: str | None = None


class IdentityClaims(BaseModel):
    """Claim shape of the client-readable identity token."""

    model_config = ConfigDict(extra="allow")

    username: str
    name: str | None = None
    avatar_url: str | None = None


class TokenPair(BaseModel):
    """Raw tokens carried by an incoming request's cookies."""

    access_token: str | None = None
    id_token: str | None = None
