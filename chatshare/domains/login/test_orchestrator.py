"""Tests for the login orchestrator."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit
from unittest.mock import AsyncMock

import pytest

from chatshare.adapters.github import GitHubClient, UserProfile
from chatshare.config import Settings
from chatshare.config.errors import ExchangeFailedError, ProfileFetchFailedError
from chatshare.domains.tokens import AccessClaims, IdentityClaims, verify_token

from .models import LoginState
from .orchestrator import LoginOrchestrator

SECRET = "login-test-secret-0123456789abcdef0123"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        client_id="cid",
        client_secret="csecret",
        jwt_secret=SECRET,
        app_url="https://chat.example",
    )


@pytest.fixture
def provider() -> AsyncMock:
    """Create a mock identity provider."""
    mock = AsyncMock(spec=GitHubClient)
    mock.exchange_code.return_value = "gho_123"
    mock.fetch_profile.return_value = UserProfile(
        username="alice", name="Alice", avatar_url="https://avatars.example/alice.png"
    )
    return mock


@pytest.fixture
def orchestrator(provider: AsyncMock, settings: Settings) -> LoginOrchestrator:
    return LoginOrchestrator(provider, settings)


def _cookie_value(header: str) -> tuple[str, str]:
    name, _, rest = header.partition("=")
    return name, rest.split(";", 1)[0]


async def test_no_code_redirects_to_provider(
    orchestrator: LoginOrchestrator, provider: AsyncMock
) -> None:
    redirect = await orchestrator.handle(code=None)

    assert redirect.status_code == 302
    assert redirect.state == LoginState.AWAITING_CODE
    assert redirect.set_cookies == []

    url = urlsplit(redirect.location)
    assert f"{url.scheme}://{url.netloc}{url.path}" == "https://github.com/login/oauth/authorize"
    assert parse_qs(url.query) == {"client_id": ["cid"]}
    provider.exchange_code.assert_not_called()


async def test_chat_id_passed_as_state(orchestrator: LoginOrchestrator) -> None:
    redirect = await orchestrator.handle(code=None, chat_id="chat-42")

    query = parse_qs(urlsplit(redirect.location).query)
    assert query == {"client_id": ["cid"], "state": ["chat-42"]}


async def test_code_completes_login(
    orchestrator: LoginOrchestrator, provider: AsyncMock, settings: Settings
) -> None:
    """Test a valid code yields two cookies for the same subject."""
    redirect = await orchestrator.handle(code="good-code")

    assert redirect.state == LoginState.COMPLETED
    assert redirect.location == "https://chat.example/"
    provider.exchange_code.assert_awaited_once_with("good-code", "cid", "csecret")
    provider.fetch_profile.assert_awaited_once_with("gho_123")

    cookies = dict(_cookie_value(header) for header in redirect.set_cookies)
    assert set(cookies) == {"access_token", "id_token"}

    access = verify_token(cookies["access_token"], SECRET, claims_model=AccessClaims)
    identity = verify_token(cookies["id_token"], SECRET, claims_model=IdentityClaims)

    assert access.subject == identity.subject == "alice"
    assert access.claims == {"role": "api"}
    assert identity.claims["name"] == "Alice"
    for token in (access, identity):
        assert token.expires_at - token.issued_at == settings.token_ttl

    max_age = f"Max-Age={int(settings.token_ttl.total_seconds())}"
    assert all(max_age in header for header in redirect.set_cookies)
    assert "HttpOnly" in redirect.set_cookies[0]
    assert "HttpOnly" not in redirect.set_cookies[1]


async def test_code_with_chat_id_returns_to_chat(orchestrator: LoginOrchestrator) -> None:
    redirect = await orchestrator.handle(code="good-code", chat_id="chat-42")
    assert redirect.location == "https://chat.example/c/chat-42"


@pytest.mark.parametrize(
    "failure",
    [
        ("exchange_code", ExchangeFailedError("bad_verification_code")),
        ("fetch_profile", ProfileFetchFailedError("Bad credentials")),
        ("fetch_profile", RuntimeError("connection reset")),
    ],
)
async def test_failure_redirects_with_error_flag(
    orchestrator: LoginOrchestrator, provider: AsyncMock, failure
) -> None:
    """Test provider failures end in an error redirect with no cookies."""
    method, error = failure
    getattr(provider, method).side_effect = error

    redirect = await orchestrator.handle(code="bad-code", chat_id="chat-42")

    assert redirect.status_code == 302
    assert redirect.state == LoginState.FAILED
    assert redirect.location == "https://chat.example/?github_login_error"
    assert redirect.set_cookies == []


async def test_token_creation_failure_sets_no_cookies(
    provider: AsyncMock, settings: Settings
) -> None:
    """Test a profile that cannot be minted into a token degrades to the error page."""
    provider.fetch_profile.return_value = UserProfile.model_construct(
        username="", name=None, avatar_url=None
    )
    redirect = await LoginOrchestrator(provider, settings).handle(code="good-code")

    assert redirect.state == LoginState.FAILED
    assert redirect.set_cookies == []
