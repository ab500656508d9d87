"""
Login Orchestrator - GitHub sign-in ending in two session cookies.

Without a code the user is sent to GitHub's authorize page. With a code the
code is exchanged for a profile, an identity token and an access token are
minted for that username, and the user is sent back to the app with both
cookies set. Every path ends in a redirect.

A chat id supplied on the way out is handed to GitHub as ``state`` and comes
back unchanged; it is never interpreted beyond building the return path.
"""

from __future__ import annotations

import logging
from urllib.parse import quote, urlencode

from chatshare.config import Settings
from chatshare.domains.tokens import (
    ACCESS_TOKEN_COOKIE,
    ID_TOKEN_COOKIE,
    create_token,
    serialize_token,
)

from .contracts import IdentityProvider
from .models import LoginRedirect, LoginState

logger = logging.getLogger(__name__)

__all__ = ["LoginOrchestrator", "LOGIN_ERROR_FLAG"]

LOGIN_ERROR_FLAG = "github_login_error"


class LoginOrchestrator:
    """
    Drives the OAuth login flow.

    Example:
        >>> orchestrator = LoginOrchestrator(GitHubClient(), settings)
        >>> redirect = await orchestrator.handle(code=None, chat_id="abc")
        >>> redirect.location
        'https://github.com/login/oauth/authorize?client_id=...&state=abc'
    """

    def __init__(self, provider: IdentityProvider, settings: Settings) -> None:
        """
        Initialize orchestrator.

        Args:
            provider: OAuth identity provider client
            settings: OAuth credentials, token secret and app URL
        """
        self.provider = provider
        self.settings = settings

    async def handle(self, code: str | None, chat_id: str | None = None) -> LoginRedirect:
        """
        Advance the login flow for one request.

        Args:
            code: Authorization code from the provider callback, if any
            chat_id: Chat to return to after login (opaque)

        Returns:
            LoginRedirect, always a 302
        """
        if not code:
            return self.authorize_redirect(chat_id)
        return await self.complete(code, chat_id)

    def authorize_redirect(self, chat_id: str | None = None) -> LoginRedirect:
        """Redirect to the provider's authorize page."""
        params = {"client_id": self.settings.client_id}
        if chat_id:
            params["state"] = chat_id

        return LoginRedirect(
            location=f"{self.settings.oauth_authorize_url}?{urlencode(params)}",
            state=LoginState.AWAITING_CODE,
        )

    async def complete(self, code: str, chat_id: str | None = None) -> LoginRedirect:
        """
        Exchange the code, mint both tokens and redirect back to the app.

        Any failure redirects to the app root with an error flag and sets
        no cookies.
        """
        settings = self.settings
        try:
            provider_token = await self.provider.exchange_code(
                code, settings.client_id, settings.client_secret
            )
            profile = await self.provider.fetch_profile(provider_token)

            # Profile goes in the script-readable identity token
            id_token = create_token(
                profile.username,
                profile.to_claims(),
                settings.jwt_secret,
                ttl=settings.token_ttl,
            )
            # API authorization goes in the HTTP-only access token
            access_token = create_token(
                profile.username,
                {"role": settings.api_role},
                settings.jwt_secret,
                ttl=settings.token_ttl,
            )

            max_age = int(settings.token_ttl.total_seconds())
            cookies = [
                serialize_token(
                    ACCESS_TOKEN_COOKIE,
                    access_token,
                    max_age=max_age,
                    secure=settings.cookie_secure,
                ),
                serialize_token(
                    ID_TOKEN_COOKIE,
                    id_token,
                    max_age=max_age,
                    secure=settings.cookie_secure,
                ),
            ]
        except Exception as e:
            logger.error("Login failed: %s", e)
            return LoginRedirect(
                location=f"{self._app_root()}/?{LOGIN_ERROR_FLAG}",
                state=LoginState.FAILED,
            )

        logger.info("Login completed for %s", profile.username)
        return LoginRedirect(
            location=self._return_url(chat_id),
            state=LoginState.COMPLETED,
            set_cookies=cookies,
        )

    def _app_root(self) -> str:
        return self.settings.app_url.rstrip("/")

    def _return_url(self, chat_id: str | None) -> str:
        if chat_id:
            return f"{self._app_root()}/c/{quote(chat_id, safe='')}"
        return f"{self._app_root()}/"
