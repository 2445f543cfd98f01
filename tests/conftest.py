"""Shared fixtures: app client with injected settings and stubbed upstream APIs."""
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from courts_finder.api.deps import (
    get_amazon_client,
    get_claude_client,
    get_foursquare_client,
    get_gemini_client,
    get_google_places_client,
)
from courts_finder.core.config import Settings, get_settings
from courts_finder.main import app
from courts_finder.services.amazon import AmazonProductClient
from courts_finder.services.anthropic_client import ClaudeClient
from courts_finder.services.foursquare import FoursquareClient
from courts_finder.services.gemini import GeminiClient
from courts_finder.services.google_places import GooglePlacesClient
from courts_finder.services.rate_limiter import (
    FixedWindowRateLimiter,
    get_chat_rate_limiter,
)


def make_settings(**overrides) -> Settings:
    values = {
        "GOOGLE_MAPS_BASE_URL": "https://maps.googleapis.com/maps/api",
        "FOURSQUARE_BASE_URL": "https://api.foursquare.com/v3",
        "GEMINI_BASE_URL": "https://generativelanguage.googleapis.com/v1beta",
        "GEMINI_MODEL": "gemini-1.5-flash-latest",
        "ANTHROPIC_BASE_URL": "https://api.anthropic.com",
        "ANTHROPIC_VERSION": "2023-06-01",
        "AMAZON_PAAPI_HOST": "webservices.amazon.com",
        "AMAZON_PAAPI_REGION": "us-east-1",
        "AMAZON_ACCESS_KEY_ID": None,
        "AMAZON_SECRET_ACCESS_KEY": None,
        "UPSTREAM_TIMEOUT_SECONDS": 10.0,
        "GOOGLE_PLACES_API_KEY": "test-google-key",
        "FOURSQUARE_API_KEY": "test-foursquare-key",
        "GOOGLE_GEMINI_API_KEY": "test-gemini-key",
        "ANTHROPIC_API_KEY": "test-anthropic-key",
        "AMAZON_ASSOCIATE_ID": "courtsfinder-20",
        "CHAT_RATE_LIMIT_PER_MINUTE": 10,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class UpstreamStub:
    """Records outbound requests and answers them with ``responder``."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"status": "OK", "results": []})
        )

    def respond_with(self, status_code: int = 200, **kwargs) -> None:
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def rate_limiter(settings):
    return FixedWindowRateLimiter(settings.CHAT_RATE_LIMIT_PER_MINUTE)


@pytest.fixture
def client(settings, rate_limiter):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_chat_rate_limiter] = lambda: rate_limiter
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def upstream(settings):
    """Route every provider client through an in-process mock transport."""
    stub = UpstreamStub()
    transport = httpx.MockTransport(stub.handler)

    app.dependency_overrides[get_google_places_client] = (
        lambda: GooglePlacesClient(settings, transport=transport)
    )
    app.dependency_overrides[get_foursquare_client] = (
        lambda: FoursquareClient(settings, transport=transport)
    )
    app.dependency_overrides[get_gemini_client] = (
        lambda: GeminiClient(settings, transport=transport)
    )
    app.dependency_overrides[get_claude_client] = (
        lambda: ClaudeClient(settings, transport=transport)
    )
    app.dependency_overrides[get_amazon_client] = (
        lambda: AmazonProductClient(settings, transport=transport)
    )
    yield stub
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured(client):
    """Switch the running app to settings without any provider keys."""
    app.dependency_overrides[get_settings] = lambda: make_settings(
        GOOGLE_PLACES_API_KEY=None,
        FOURSQUARE_API_KEY=None,
        GOOGLE_GEMINI_API_KEY=None,
        ANTHROPIC_API_KEY=None,
    )
    return client
