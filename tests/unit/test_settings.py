"""Unit tests for Settings."""

from src.config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("DOCS_SERVER_URL", "DOCS_API_KEY", "WEBHOOK_SECRET", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.DOCS_SERVER_URL == ""
    assert settings.DOCS_API_KEY == ""
    assert settings.WEBHOOK_SECRET == ""
    assert settings.GITHUB_API_URL == "https://api.github.com"
    assert settings.PORT == 3002


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DOCS_SERVER_URL", "http://docs.internal:4000")
    monkeypatch.setenv("DOCS_API_KEY", "key-123")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.DOCS_SERVER_URL == "http://docs.internal:4000"
    assert settings.DOCS_API_KEY == "key-123"
    assert settings.PORT == 8080
