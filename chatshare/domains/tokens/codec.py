"""
Token Codec - Signed, expiring session tokens.

Tokens are HS256 JWTs carrying a subject (``sub``), issue/expiry times
(``iat``/``exp``) and an open claim payload stored beside them. The same
codec mints both the identity token and the access token; they differ only
in their claims and in how they are transported.

Example:
    >>> token = create_token("alice", {"role": "api"}, "secret")
    >>> verify_token(token, "secret").claims
    {'role': 'api'}
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt as pyjwt
from pydantic import BaseModel, ValidationError

from chatshare.config.errors import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)

from .models import TokenClaims

__all__ = ["DEFAULT_TTL", "RESERVED_CLAIMS", "create_token", "verify_token"]

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=7)
RESERVED_CLAIMS = frozenset({"sub", "iat", "exp"})


def create_token(
    subject: str,
    claims: dict[str, Any],
    secret: str,
    *,
    ttl: timedelta = DEFAULT_TTL,
    now: datetime | None = None,
) -> str:
    """
    Create a signed token for a subject.

    Args:
        subject: Stable identity key (the username)
        claims: Payload stored alongside the registered claims
        secret: Shared signing secret
        ttl: Lifetime from issuance
        now: Issuance time (defaults to the current UTC time)

    Returns:
        Encoded JWT string

    Raises:
        ValueError: If claims use a reserved name or subject is empty
    """
    if not subject:
        raise ValueError("Token subject is required")

    clash = RESERVED_CLAIMS.intersection(claims)
    if clash:
        raise ValueError(f"Reserved claim names in payload: {sorted(clash)}")

    issued = now or datetime.now(timezone.utc)
    payload = {
        **claims,
        "sub": subject,
        "iat": int(issued.timestamp()),
        "exp": int((issued + ttl).timestamp()),
    }
    return pyjwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(
    token: str,
    secret: str,
    *,
    claims_model: type[BaseModel] | None = None,
    now: datetime | None = None,
) -> TokenClaims:
    """
    Verify a token and return its contents.

    Args:
        token: Encoded JWT string
        secret: Shared signing secret
        claims_model: Optional schema the claim payload must satisfy
        now: Verification time (defaults to the current UTC time)

    Returns:
        TokenClaims with subject, claims and timestamps

    Raises:
        InvalidSignatureError: Signature does not match the secret
        TokenExpiredError: Token is past its expiry time
        MalformedTokenError: Token cannot be decoded or has the wrong shape
    """
    try:
        payload = pyjwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            # Expiry is checked below against an injectable clock. Other
            # registered claims are opaque payload here.
            options={
                "require": ["sub", "iat", "exp"],
                "verify_exp": False,
                "verify_iat": False,
                "verify_nbf": False,
                "verify_aud": False,
                "verify_iss": False,
                "verify_sub": False,
                "verify_jti": False,
            },
        )
    except pyjwt.InvalidSignatureError as e:
        raise InvalidSignatureError() from e
    except pyjwt.InvalidTokenError as e:
        raise MalformedTokenError(f"Malformed token: {e}") from e

    subject = payload.pop("sub")
    issued_at = payload.pop("iat")
    expires_at = payload.pop("exp")

    if not isinstance(subject, str) or not subject:
        raise MalformedTokenError("Token subject must be a non-empty string")
    if not isinstance(issued_at, int) or not isinstance(expires_at, int):
        raise MalformedTokenError("Token timestamps must be integers")

    current = now or datetime.now(timezone.utc)
    if current.timestamp() >= expires_at:
        raise TokenExpiredError()

    if claims_model is not None:
        try:
            claims_model.model_validate(payload)
        except ValidationError as e:
            raise MalformedTokenError(
                f"Token claims do not match {claims_model.__name__}"
            ) from e

    return TokenClaims(
        subject=subject,
        claims=payload,
        issued_at=datetime.fromtimestamp(issued_at, timezone.utc),
        expires_at=datetime.fromtimestamp(expires_at, timezone.utc),
    )
