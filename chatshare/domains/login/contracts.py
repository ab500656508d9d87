"""
Login Contracts - Interfaces for the login domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from chatshare.adapters.github import UserProfile


@runtime_checkable
class IdentityProvider(Protocol):
    """Contract for an OAuth identity provider."""

    async def exchange_code(
        self,
        code: str,
        client_id: str,
        client_secret: str,
    ) -> str:
        """
        Exchange an authorization code for a provider access token.

        Raises:
            ExchangeFailedError: Exchange rejected or malformed
        """
        ...

    async def fetch_profile(self, access_token: str) -> UserProfile:
        """
        Fetch the authenticated user's profile.

        Raises:
            ProfileFetchFailedError: Request rejected or malformed
        """
        ...
