"""Shared fixtures."""

import pytest

from email_auth.config import reset_settings
from email_auth.core import ProviderConfig


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Each test starts without a default Strapi domain in the environment."""
    monkeypatch.delenv("OAUTH_STRAPI_DOMAIN", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def default_config() -> ProviderConfig:
    return ProviderConfig(domain="https://cms.example.com/api")
