"""
GitHub Client - OAuth code exchange and user profile lookup.

This is the ONLY place that calls GitHub. The login flow treats it as an
opaque identity provider: a valid code in, a username and profile out.

Both calls are single round-trips with no retry; any failure is surfaced
to the caller immediately.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from chatshare.config.errors import ExchangeFailedError, ProfileFetchFailedError

from .models import GitHubConfig, UserProfile

logger = logging.getLogger(__name__)

__all__ = ["GitHubClient"]


class GitHubClient:
    """
    GitHub OAuth client.

    Example:
        >>> client = GitHubClient()
        >>> token = await client.exchange_code(code, client_id, client_secret)
        >>> profile = await client.fetch_profile(token)
        >>> profile.username
        'alice'
    """

    def __init__(
        self,
        config: GitHubConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            config: Endpoint configuration. Uses GitHub defaults if None.
            transport: Optional httpx transport (used by tests)
        """
        self.config = config or GitHubConfig()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            transport=self._transport,
            headers={"User-Agent": self.config.user_agent},
        )

    async def exchange_code(
        self,
        code: str,
        client_id: str,
        client_secret: str,
    ) -> str:
        """
        Exchange an authorization code for a GitHub access token.

        Args:
            code: Authorization code from the OAuth callback
            client_id: OAuth app client ID
            client_secret: OAuth app client secret

        Returns:
            GitHub access token

        Raises:
            ExchangeFailedError: Non-success response or malformed body
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    self.config.token_url,
                    data={
                        "code": code,
                        "client_id": client_id,
                        "client_secret": client_secret,
                    },
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as e:
            raise ExchangeFailedError(f"Failed to connect to GitHub: {e}") from e

        if response.status_code != 200:
            raise ExchangeFailedError(
                f"Token exchange failed with status {response.status_code}",
                {"status": response.status_code},
            )

        body = _json_object(response)
        if body is None:
            raise ExchangeFailedError("Token exchange returned a malformed body")

        # GitHub reports bad codes as 200 with an error field
        if "error" in body:
            raise ExchangeFailedError(
                f"Token exchange failed: {body.get('error_description') or body['error']}",
                {"error": body["error"]},
            )

        access_token = body.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise ExchangeFailedError("Token exchange response has no access_token")

        return access_token

    async def fetch_profile(self, access_token: str) -> UserProfile:
        """
        Fetch the authenticated user's profile.

        Args:
            access_token: GitHub access token from exchange_code

        Returns:
            UserProfile with username, name and avatar

        Raises:
            ProfileFetchFailedError: Non-success response or malformed body
        """
        try:
            async with self._client() as client:
                response = await client.get(
                    f"{self.config.api_url.rstrip('/')}/user",
                    headers={
                        "Authorization": f"Bearer {access_token}",
                        "Accept": "application/vnd.github+json",
                    },
                )
        except httpx.HTTPError as e:
            raise ProfileFetchFailedError(f"Failed to connect to GitHub: {e}") from e

        if response.status_code != 200:
            logger.warning("GitHub profile request failed: %s", response.status_code)
            raise ProfileFetchFailedError(
                f"Profile request failed with status {response.status_code}",
                {"status": response.status_code},
            )

        body = _json_object(response)
        login = body.get("login") if body else None
        if not isinstance(login, str) or not login:
            raise ProfileFetchFailedError("Profile response has no login")

        return UserProfile(
            username=login,
            name=body.get("name"),
            avatar_url=body.get("avatar_url"),
        )


def _json_object(response: httpx.Response) -> dict[str, Any] | None:
    """Parse a JSON object body, or None if the body is not one."""
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None
