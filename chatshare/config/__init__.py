"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    BadRequestError,
    ChatShareError,
    ErrorCode,
    ExchangeFailedError,
    ForbiddenError,
    IdentityProviderError,
    InternalError,
    InvalidSignatureError,
    MalformedTokenError,
    NotFoundError,
    ProfileFetchFailedError,
    TokenError,
    TokenExpiredError,
    TooManyRequestsError,
)
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "ChatShareError",
    "BadRequestError",
    "ForbiddenError",
    "TooManyRequestsError",
    "NotFoundError",
    "InternalError",
    "TokenError",
    "InvalidSignatureError",
    "TokenExpiredError",
    "MalformedTokenError",
    "IdentityProviderError",
    "ExchangeFailedError",
    "ProfileFetchFailedError",
]
