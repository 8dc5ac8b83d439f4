"""Settings parsing from the environment."""
from __future__ import annotations

from prague_flats.core.config import Settings


def test_cors_origins_accept_comma_separated_env(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.com, http://b.com")

    settings = Settings(_env_file=None)

    assert settings.cors_allow_origins == ["http://a.com", "http://b.com"]


def test_cors_origins_accept_json_list_env(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["http://a.com"]')

    assert Settings(_env_file=None).cors_allow_origins == ["http://a.com"]


def test_cors_origins_default_to_wildcard(monkeypatch) -> None:
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

    assert Settings(_env_file=None).cors_allow_origins == ["*"]
