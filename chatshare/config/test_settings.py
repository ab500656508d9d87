"""Tests for application settings."""

from pathlib import Path

import pytest

from .settings import Settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the ambient environment and any .env file out of these tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JWT_SECRET", raising=False)


def test_unset_secret_is_random_per_instance() -> None:
    first = Settings()
    second = Settings()

    assert first.jwt_secret != second.jwt_secret
    assert len(first.jwt_secret) >= 32
    assert first.jwt_secret_generated
    assert second.jwt_secret_generated


def test_secret_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "configured-secret")

    settings = Settings()

    assert settings.jwt_secret == "configured-secret"
    assert not settings.jwt_secret_generated


def test_secret_from_argument() -> None:
    settings = Settings(jwt_secret="explicit")
    assert not settings.jwt_secret_generated


def test_durations() -> None:
    settings = Settings(token_ttl_days=2, share_window_hours=6)
    assert settings.token_ttl.days == 2
    assert settings.share_window.total_seconds() == 6 * 3600
