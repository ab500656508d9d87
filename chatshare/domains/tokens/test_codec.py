"""Tests for the token codec."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from chatshare.config.errors import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)

from .codec import create_token, verify_token
from .models import AccessClaims, IdentityClaims

SECRET_A = "secret-a-0123456789abcdef0123456789abcdef"
SECRET_B = "secret-b-0123456789abcdef0123456789abcdef"
ISSUED = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_round_trip_returns_subject_and_claims() -> None:
    """Test verify(create(...)) returns what was signed."""
    profile = {"username": "alice", "name": "Alice", "avatar_url": "https://a/x.png"}
    token = create_token("alice", profile, SECRET_A)

    result = verify_token(token, SECRET_A)

    assert result.subject == "alice"
    assert result.claims == profile
    assert result.expires_at - result.issued_at == timedelta(days=7)


def test_wrong_secret_is_invalid_signature() -> None:
    """Test a token signed with another secret is rejected."""
    token = create_token("alice", {"role": "api"}, SECRET_A)

    with pytest.raises(InvalidSignatureError):
        verify_token(token, SECRET_B)


def test_expired_token() -> None:
    """Test expiry is enforced against the verification clock."""
    token = create_token("alice", {"role": "api"}, SECRET_A, now=ISSUED)

    # Still valid one second before expiry
    verify_token(token, SECRET_A, now=ISSUED + timedelta(days=7, seconds=-1))

    with pytest.raises(TokenExpiredError):
        verify_token(token, SECRET_A, now=ISSUED + timedelta(days=7))


def test_default_clock_rejects_old_token() -> None:
    """Test a token issued long ago fails with the real clock."""
    token = create_token(
        "alice", {"role": "api"}, SECRET_A, now=datetime.now(timezone.utc) - timedelta(days=8)
    )
    with pytest.raises(TokenExpiredError):
        verify_token(token, SECRET_A)


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c", "eyJhbGciOiJIUzI1NiJ9.e30"])
def test_malformed_token(garbage: str) -> None:
    """Test undecodable input is reported as malformed."""
    with pytest.raises(MalformedTokenError):
        verify_token(garbage, SECRET_A)


def test_missing_registered_claims_is_malformed() -> None:
    """Test a correctly signed token without exp is malformed."""
    token = pyjwt.encode({"sub": "alice", "iat": 1}, SECRET_A, algorithm="HS256")
    with pytest.raises(MalformedTokenError):
        verify_token(token, SECRET_A)


def test_deterministic_for_same_inputs() -> None:
    """Test identical inputs and timestamp give identical tokens."""
    first = create_token("alice", {"role": "api"}, SECRET_A, now=ISSUED)
    second = create_token("alice", {"role": "api"}, SECRET_A, now=ISSUED)
    assert first == second


def test_custom_ttl() -> None:
    """Test the expiry horizon follows the ttl argument."""
    token = create_token("alice", {}, SECRET_A, ttl=timedelta(hours=1), now=ISSUED)
    result = verify_token(token, SECRET_A, now=ISSUED)
    assert result.expires_at == ISSUED + timedelta(hours=1)


def test_reserved_claims_rejected() -> None:
    """Test claims cannot override registered fields."""
    with pytest.raises(ValueError):
        create_token("alice", {"sub": "bob"}, SECRET_A)


@pytest.mark.parametrize(
    "claims",
    [
        {"aud": "chatcraft"},
        {"aud": ["chatcraft", "other"]},
        {"nbf": int((ISSUED + timedelta(hours=1)).timestamp())},
        {"iss": 7},
        {"jti": 42},
    ],
)
def test_registered_claim_names_round_trip(claims: dict) -> None:
    """Test payload keys PyJWT would otherwise validate come back unchanged."""
    token = create_token("alice", claims, SECRET_A, now=ISSUED)
    assert verify_token(token, SECRET_A, now=ISSUED).claims == claims


def test_empty_subject_rejected() -> None:
    with pytest.raises(ValueError):
        create_token("", {}, SECRET_A)


def test_claims_model_enforces_shape() -> None:
    """Test identity and access tokens are not interchangeable."""
    access = create_token("alice", {"role": "api"}, SECRET_A)
    identity = create_token("alice", {"username": "alice"}, SECRET_A)

    assert verify_token(access, SECRET_A, claims_model=AccessClaims).claims == {"role": "api"}
    assert verify_token(identity, SECRET_A, claims_model=IdentityClaims).subject == "alice"

    with pytest.raises(MalformedTokenError):
        verify_token(identity, SECRET_A, claims_model=AccessClaims)
    with pytest.raises(MalformedTokenError):
        verify_token(access, SECRET_A, claims_model=IdentityClaims)


def test_access_claims_allow_missing_role() -> None:
    """Test a role-less access token is well-formed (the role check is separate)."""
    token = create_token("alice", {}, SECRET_A)
    result = verify_token(token, SECRET_A, claims_model=AccessClaims)
    assert "role" not in result.claims
