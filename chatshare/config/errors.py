"""
Error Taxonomy - Consistent error codes across the application.

Usage:
    from chatshare.config.errors import ForbiddenError

    raise ForbiddenError("Access Token does not match username")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Token errors
    TOKEN_INVALID_SIGNATURE = "TOKEN_INVALID_SIGNATURE"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_MALFORMED = "TOKEN_MALFORMED"

    # Identity provider errors
    OAUTH_EXCHANGE_FAILED = "OAUTH_EXCHANGE_FAILED"
    OAUTH_PROFILE_FAILED = "OAUTH_PROFILE_FAILED"

    # Security errors
    SECURITY_FORBIDDEN = "SECURITY_FORBIDDEN"
    SECURITY_RATE_LIMITED = "SECURITY_RATE_LIMITED"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


class ChatShareError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


# HTTP-facing failures raised by the sharing gateway
class BadRequestError(ChatShareError):
    """Malformed input (wrong key shape, wrong content type)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message, details)


class ForbiddenError(ChatShareError):
    """Missing, invalid or mismatched credentials, or total quota exceeded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.SECURITY_FORBIDDEN, message, details)


class TooManyRequestsError(ChatShareError):
    """Rate-window quota exceeded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.SECURITY_RATE_LIMITED, message, details)


class NotFoundError(ChatShareError):
    """Requested object does not exist."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.NOT_FOUND, message, details)


class InternalError(ChatShareError):
    """Unexpected failure in a downstream dependency."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.INTERNAL_ERROR, message, details)


# Token codec failures
class TokenError(ChatShareError):
    """Base class for token verification failures."""


class InvalidSignatureError(TokenError):
    """Token signature does not match the shared secret."""

    def __init__(self, message: str = "Invalid token signature") -> None:
        super().__init__(ErrorCode.TOKEN_INVALID_SIGNATURE, message)


class TokenExpiredError(TokenError):
    """Token is past its expiry time."""

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(ErrorCode.TOKEN_EXPIRED, message)


class MalformedTokenError(TokenError):
    """Token cannot be decoded or has the wrong claim shape."""

    def __init__(self, message: str = "Malformed token") -> None:
        super().__init__(ErrorCode.TOKEN_MALFORMED, message)


# Identity provider failures
class IdentityProviderError(ChatShareError):
    """Base class for OAuth provider failures."""


class ExchangeFailedError(IdentityProviderError):
    """Authorization code could not be exchanged for an access token."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.OAUTH_EXCHANGE_FAILED, message, details)


class ProfileFetchFailedError(IdentityProviderError):
    """User profile could not be fetched with the provider token."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.OAUTH_PROFILE_FAILED, message, details)
