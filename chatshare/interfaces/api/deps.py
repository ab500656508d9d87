"""
API Dependencies - Dependency injection for FastAPI routes.

Provides singleton instances of the object store and service objects.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from chatshare.adapters.github import GitHubClient, GitHubConfig
from chatshare.adapters.sqlite import SQLiteObjectStore
from chatshare.config import Settings, get_settings
from chatshare.domains.login import LoginOrchestrator
from chatshare.domains.sharing import ObjectStore, ShareGateway


@lru_cache
def get_object_store() -> SQLiteObjectStore:
    """Get object store singleton."""
    settings = get_settings()
    return SQLiteObjectStore(settings.db_path)


@lru_cache
def get_github_client() -> GitHubClient:
    """Get GitHub client singleton."""
    settings = get_settings()
    return GitHubClient(
        GitHubConfig(
            token_url=settings.oauth_token_url,
            api_url=settings.github_api_url,
            timeout_seconds=settings.http_timeout_seconds,
        )
    )


def get_share_gateway(
    store: ObjectStore = Depends(get_object_store),
    settings: Settings = Depends(get_settings),
) -> ShareGateway:
    """Build the share gateway for a request."""
    return ShareGateway(store, settings)


def get_login_orchestrator(
    provider: GitHubClient = Depends(get_github_client),
    settings: Settings = Depends(get_settings),
) -> LoginOrchestrator:
    """Build the login orchestrator for a request."""
    return LoginOrchestrator(provider, settings)


async def init_services() -> None:
    """
    Initialize services on startup.

    This should be called from the FastAPI lifespan handler.
    """
    store = get_object_store()
    await store.initialize()


async def cleanup_services() -> None:
    """Cleanup services on shutdown."""
    store = get_object_store()
    await store.close()
