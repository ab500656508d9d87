"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

import secrets
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # GitHub OAuth app (CLIENT_ID / CLIENT_SECRET)
    client_id: str = ""
    client_secret: str = ""
    oauth_authorize_url: str = "https://github.com/login/oauth/authorize"
    oauth_token_url: str = "https://github.com/login/oauth/access_token"
    github_api_url: str = "https://api.github.com"
    http_timeout_seconds: float = 10.0

    # Session tokens (JWT_SECRET). Unset means a per-process random secret,
    # so sessions do not survive a restart.
    jwt_secret: str = Field(default_factory=lambda: secrets.token_urlsafe(32))
    token_ttl_days: int = 7
    api_role: str = "api"
    cookie_secure: bool = True

    # Public site the login flow redirects back to
    app_url: str = "https://chatcraft.org"

    # Sharing limits
    share_total_limit: int = 500
    share_daily_limit: int = 10
    share_window_hours: int = 24

    # Object store
    db_path: Path = Path("data/chatshare.db")

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(days=self.token_ttl_days)

    @property
    def jwt_secret_generated(self) -> bool:
        """True when no JWT_SECRET was configured."""
        return "jwt_secret" not in self.model_fields_set

    @property
    def share_window(self) -> timedelta:
        return timedelta(hours=self.share_window_hours)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
