"""Tests for settings loading."""
import pytest

from courts_finder.core.config import Settings
from tests.conftest import make_settings

BASE_URLS = [
    "GOOGLE_MAPS_BASE_URL",
    "FOURSQUARE_BASE_URL",
    "GEMINI_BASE_URL",
    "ANTHROPIC_BASE_URL",
    "AMAZON_PAAPI_HOST",
]


def test_anthropic_base_url_is_host_only(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_BASE_URL", raising=False)
    assert Settings(_env_file=None).ANTHROPIC_BASE_URL == "https://api.anthropic.com"


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "https://proxy.example.com")
    assert Settings(_env_file=None).ANTHROPIC_BASE_URL == "https://proxy.example.com"


@pytest.mark.parametrize("name", BASE_URLS)
def test_fixture_settings_ignore_ambient_base_urls(monkeypatch, name):
    monkeypatch.setenv(name, "https://ambient.example.com")
    assert getattr(make_settings(), name) != "https://ambient.example.com"


@pytest.fixture
def ambient_anthropic_url(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "https://ambient.example.com/v1")


def test_claude_is_called_on_messages_endpoint(ambient_anthropic_url, client, upstream):
    upstream.respond_with(200, json={"content": [{"type": "text", "text": "{}"}]})

    client.post(
        "/chat/recommendations",
        json={"userMessage": "Shoes?", "courtContext": {"sport": "tennis"}},
    )

    request = upstream.requests[0]
    assert request.url.host == "api.anthropic.com"
    assert request.url.path == "/v1/messages"
