"""
Cookie Transport - Session tokens as cookies.

The access token travels in an HTTP-only cookie scoped to the API so page
scripts can never read it. The identity token travels in a normal cookie
so the client can display profile data.
"""

from __future__ import annotations

from http.cookies import SimpleCookie

from starlette.requests import Request

from .models import TokenPair

__all__ = [
    "ACCESS_TOKEN_COOKIE",
    "ID_TOKEN_COOKIE",
    "extract_tokens",
    "serialize_token",
]

ACCESS_TOKEN_COOKIE = "access_token"
ID_TOKEN_COOKIE = "id_token"

# name -> (path, httponly)
_COOKIE_PROFILES: dict[str, tuple[str, bool]] = {
    ACCESS_TOKEN_COOKIE: ("/api", True),
    ID_TOKEN_COOKIE: ("/", False),
}


def serialize_token(
    name: str,
    token: str,
    *,
    max_age: int,
    secure: bool = True,
) -> str:
    """
    Build a Set-Cookie header value for a token.

    Args:
        name: Cookie name (``access_token`` or ``id_token``)
        token: Encoded token
        max_age: Cookie lifetime in seconds
        secure: Whether to set the Secure attribute

    Returns:
        Header value suitable for ``Set-Cookie``
    """
    if name not in _COOKIE_PROFILES:
        raise ValueError(f"Unknown token cookie: {name}")

    path, httponly = _COOKIE_PROFILES[name]

    cookie: SimpleCookie = SimpleCookie()
    cookie[name] = token
    morsel = cookie[name]
    morsel["path"] = path
    morsel["max-age"] = max_age
    morsel["samesite"] = "Lax"
    if secure:
        morsel["secure"] = True
    if httponly:
        morsel["httponly"] = True

    return morsel.OutputString()


def extract_tokens(request: Request) -> TokenPair:
    """Read both session tokens from a request's cookies."""
    return TokenPair(
        access_token=request.cookies.get(ACCESS_TOKEN_COOKIE) or None,
        id_token=request.cookies.get(ID_TOKEN_COOKIE) or None,
    )
