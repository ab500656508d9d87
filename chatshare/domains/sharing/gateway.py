"""
Share Gateway - Create, read and delete shared chats.

Create and delete require both session cookies and an access token whose
subject owns the key and whose role is the API role. Read is public.
Every check runs before the store is touched, and cookies are only
re-issued on success.

Example:
    >>> gateway = ShareGateway(store, settings)
    >>> result = await gateway.create(["alice", "123"], "application/json", body, tokens)
    >>> result.message
    'Chat shared successfully'
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from chatshare.config import Settings
from chatshare.config.errors import (
    BadRequestError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    TokenError,
    TooManyRequestsError,
)
from chatshare.domains.tokens import (
    ACCESS_TOKEN_COOKIE,
    ID_TOKEN_COOKIE,
    AccessClaims,
    TokenClaims,
    TokenPair,
    serialize_token,
    verify_token,
)

from .contracts import ObjectStore
from .models import ShareKey, ShareResult, StoredObject
from .quota import compute_quota, enforce_quota

logger = logging.getLogger(__name__)

__all__ = ["ShareGateway", "parse_share_key"]

SHARE_URL_HINT = "Expected share URL of the form /api/share/{user}/{id}"


def parse_share_key(segments: Sequence[str]) -> ShareKey:
    """
    Build a share key from path segments.

    Raises:
        BadRequestError: Anything other than two non-empty segments
    """
    if len(segments) != 2 or not all(segments):
        raise BadRequestError(SHARE_URL_HINT)
    owner, object_id = segments
    return ShareKey(owner=owner, object_id=object_id)


class ShareGateway:
    """
    Sharing operations over an object store.

    Quotas are recomputed from the owner's listing on each create; no
    counter is persisted.
    """

    def __init__(self, store: ObjectStore, settings: Settings) -> None:
        """
        Initialize gateway.

        Args:
            store: Object store holding shared chats
            settings: Token secret, role and quota configuration
        """
        self.store = store
        self.settings = settings

    async def create(
        self,
        segments: Sequence[str],
        content_type: str | None,
        body: bytes,
        tokens: TokenPair,
        now: datetime | None = None,
    ) -> ShareResult:
        """
        Create or overwrite a shared chat.

        Args:
            segments: Path segments after /api/share/
            content_type: Request Content-Type header
            body: Request body to store
            tokens: Session tokens from the request cookies
            now: Reference time for token expiry and the quota window

        Returns:
            ShareResult with refreshed cookies

        Raises:
            ForbiddenError: Missing/invalid token, wrong owner or role, total limit
            BadRequestError: Not JSON, or bad key shape
            TooManyRequestsError: Too many shares in the window
            InternalError: Store failure
        """
        access_token, id_token = _require_tokens(tokens)

        if not content_type or "application/json" not in content_type:
            raise BadRequestError("Expected JSON")

        key = parse_share_key(segments)
        current = now or datetime.now(timezone.utc)

        try:
            payload = verify_token(
                access_token,
                self.settings.jwt_secret,
                claims_model=AccessClaims,
                now=current,
            )
        except TokenError as e:
            logger.info("Rejected share for %s: %s", key.path, e.message)
            raise ForbiddenError("Invalid Access Token") from e

        self._authorize(key, payload)

        try:
            listing = await self.store.list(key.prefix)
        except Exception as e:
            logger.exception("Listing %s failed", key.prefix)
            raise InternalError(f"Unable to share chat: {e}") from e

        state = compute_quota(
            listing,
            current,
            self.settings.share_window,
        )
        try:
            enforce_quota(
                state,
                self.settings.share_total_limit,
                self.settings.share_daily_limit,
            )
        except (ForbiddenError, TooManyRequestsError):
            logger.warning(
                "Share quota exceeded for %s: total=%d recent=%d",
                key.owner,
                state.total,
                state.recent,
            )
            raise

        try:
            await self.store.put(key.path, body, content_type)
        except Exception as e:
            logger.exception("Storing %s failed", key.path)
            raise InternalError(f"Unable to share chat: {e}") from e

        logger.info("Shared %s (%d bytes)", key.path, len(body))
        return ShareResult(
            message="Chat shared successfully",
            set_cookies=self._refresh_cookies(access_token, id_token, payload, current),
        )

    async def read(self, segments: Sequence[str]) -> StoredObject:
        """
        Fetch a shared chat. No authentication.

        Raises:
            BadRequestError: Bad key shape
            NotFoundError: No such object
            InternalError: Store failure
        """
        key = parse_share_key(segments)

        try:
            stored = await self.store.get(key.path)
        except Exception as e:
            logger.exception("Reading %s failed", key.path)
            raise InternalError(f"Unable to get chat: {e}") from e

        if stored is None:
            raise NotFoundError(f"{key.path} not found")
        return stored

    async def delete(
        self,
        segments: Sequence[str],
        tokens: TokenPair,
        now: datetime | None = None,
    ) -> ShareResult:
        """
        Delete a shared chat.

        A token that fails verification is reported as BadRequestError
        carrying the verification message, unlike create which answers
        ForbiddenError("Invalid Access Token").

        Raises:
            ForbiddenError: Missing tokens, wrong owner or role
            BadRequestError: Bad key shape or unverifiable token
            InternalError: Store failure
        """
        access_token, id_token = _require_tokens(tokens)
        key = parse_share_key(segments)
        current = now or datetime.now(timezone.utc)

        try:
            payload = verify_token(
                access_token,
                self.settings.jwt_secret,
                claims_model=AccessClaims,
                now=current,
            )
        except TokenError as e:
            logger.info("Rejected delete for %s: %s", key.path, e.message)
            raise BadRequestError(e.message) from e

        self._authorize(key, payload)

        try:
            await self.store.delete(key.path)
        except Exception as e:
            logger.exception("Deleting %s failed", key.path)
            raise InternalError(f"Unable to delete chat: {e}") from e

        logger.info("Deleted %s", key.path)
        return ShareResult(
            message="Chat deleted successfully",
            set_cookies=self._refresh_cookies(access_token, id_token, payload, current),
        )

    def _authorize(self, key: ShareKey, payload: TokenClaims) -> None:
        """Check the verified token owns the key and carries the API role."""
        if payload.subject != key.owner:
            raise ForbiddenError("Access Token does not match username")

        role = self.settings.api_role
        if payload.claims.get("role") != role:
            raise ForbiddenError(f"Access Token missing '{role}' role")

    def _refresh_cookies(
        self,
        access_token: str,
        id_token: str,
        payload: TokenClaims,
        now: datetime,
    ) -> list[str]:
        """
        Re-issue both cookies so they expire with the access token.

        Both tokens are minted together at login, so the access token's
        expiry stands in for the pair.
        """
        max_age = max(0, int((payload.expires_at - now).total_seconds()))
        secure = self.settings.cookie_secure
        return [
            serialize_token(ACCESS_TOKEN_COOKIE, access_token, max_age=max_age, secure=secure),
            serialize_token(ID_TOKEN_COOKIE, id_token, max_age=max_age, secure=secure),
        ]


def _require_tokens(tokens: TokenPair) -> tuple[str, str]:
    if not tokens.access_token:
        raise ForbiddenError("Missing Access Token")
    if not tokens.id_token:
        raise ForbiddenError("Missing ID Token")
    return tokens.access_token, tokens.id_token
