"""Shared fixtures for the Quotes test suite."""

import pytest

import quotes

SERVICE_URL = "http://localhost:4000"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the developer's QUOTES_* variables and .env files out of tests."""
    for name in ("QUOTES_SERVICE_URL", "QUOTES_TOKEN", "QUOTES_TIMEOUT", "QUOTES_LOG_LEVEL", "QUOTES_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(quotes, "_default_client", None)
    yield


@pytest.fixture
def service_url() -> str:
    return SERVICE_URL
