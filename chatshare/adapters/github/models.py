"""
GitHub Models - Configuration and profile types for the GitHub adapter.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GitHubConfig(BaseModel):
    """GitHub OAuth endpoint configuration."""

    token_url: str = "https://github.com/login/oauth/access_token"
    api_url: str = "https://api.github.com"
    timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = "chatshare"


class UserProfile(BaseModel):
    """Authenticated GitHub user, as stored in the identity token."""

    username: str = Field(..., min_length=1)
    name: str | None = None
    avatar_url: str | None = None

    def to_claims(self) -> dict[str, str | None]:
        """Profile claims for the identity token."""
        return self.model_dump()
