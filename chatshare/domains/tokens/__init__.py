"""
Tokens Domain - Session token codec and cookie transport.

This domain handles:
- Signing and verifying expiring session tokens
- Identity vs. access claim schemas
- Serializing tokens into cookies and reading them back
"""

from .codec import DEFAULT_TTL, create_token, verify_token
from .cookies import (
    ACCESS_TOKEN_COOKIE,
    ID_TOKEN_COOKIE,
    extract_tokens,
    serialize_token,
)
from .models import AccessClaims, IdentityClaims, TokenClaims, TokenPair

__all__ = [
    # Codec
    "create_token",
    "verify_token",
    "DEFAULT_TTL",
    # Cookies
    "serialize_token",
    "extract_tokens",
    "ACCESS_TOKEN_COOKIE",
    "ID_TOKEN_COOKIE",
    # Models
    "TokenClaims",
    "AccessClaims",
    "IdentityClaims",
    "TokenPair",
]
