"""Tests for Amazon product lookups in equipment recommendations."""
import json

import httpx
import pytest

from courts_finder.services.amazon import placeholder_image
from tests.conftest import make_settings
from tests.test_amazon import WILSON_ITEM
from tests.test_chat_api import CLAUDE_JSON, ask, claude_reply


@pytest.fixture
def settings():
    return make_settings(AMAZON_ACCESS_KEY_ID="AKIDEXAMPLE", AMAZON_SECRET_ACCESS_KEY="secret")


def route_by_host(claude_json, amazon):
    def responder(request: httpx.Request) -> httpx.Response:
        if request.url.host == "api.anthropic.com":
            return httpx.Response(200, json=claude_reply(json.dumps(claude_json)))
        if request.url.host == "webservices.amazon.com":
            return amazon
        return httpx.Response(404)
    return responder


def amazon_keywords(upstream):
    return [
        json.loads(request.content)["Keywords"]
        for request in upstream.requests
        if request.url.host == "webservices.amazon.com"
    ]


def test_pick_is_matched_to_amazon_product(client, upstream):
    upstream.responder = route_by_host(
        CLAUDE_JSON, httpx.Response(200, json={"SearchResult": {"Items": [WILSON_ITEM]}})
    )

    data = ask(client).json()

    pick = data["recommendations"][0]
    assert pick["purchaseLinks"]["amazon"] == (
        "https://www.amazon.com/dp/B00WILSON1?tag=courtsfinder-20"
    )
    assert pick["priceRange"] == "$249.00"
    assert pick["userRating"] == "4.7/5 stars (1234 reviews)"
    assert pick["imageUrl"] == "https://m.media-amazon.com/images/I/wilson.jpg"
    assert pick["features"] == ["97 sq in head", "Braided graphite"]
    assert amazon_keywords(upstream) == ["Tennis Wilson Pro Staff 97 clay outdoor"]


def test_amazon_failure_keeps_search_link(client, upstream):
    upstream.responder = route_by_host(
        CLAUDE_JSON, httpx.Response(500, json={"Errors": [{"Code": "InternalFailure"}]})
    )

    response = ask(client)

    assert response.status_code == 200
    pick = response.json()["recommendations"][0]
    assert pick["purchaseLinks"]["amazon"] == (
        "https://www.amazon.com/s?k=Wilson%20Pro%20Staff%2097&tag=courtsfinder-20"
    )
    assert pick["priceRange"] == "$200-250"
    assert pick["imageUrl"] == placeholder_image("tennis")


def test_no_picks_falls_back_to_direct_search(client, upstream):
    reply = {"message": "Here you go", "recommendations": []}
    upstream.responder = route_by_host(
        reply, httpx.Response(200, json={"SearchResult": {"Items": [WILSON_ITEM]}})
    )

    data = ask(client).json()

    assert data["totalRecommendations"] == 1
    pick = data["recommendations"][0]
    assert pick["brand"] == "Wilson"
    assert pick["model"] == "Pro Staff"
    assert pick["purchaseLinks"]["amazon"] == (
        "https://www.amazon.com/dp/B00WILSON1?tag=courtsfinder-20"
    )
    assert pick["whyRecommended"] == "Perfect for tennis on clay outdoor courts"
    assert amazon_keywords(upstream) == ["Tennis Which racquet for clay? clay outdoor"]


def test_no_picks_and_no_products_uses_generic_pick(client, upstream):
    reply = {"message": "Hmm", "recommendations": []}
    no_results = {"Errors": [{"Code": "NoResults", "Message": "No results"}]}
    upstream.responder = route_by_host(reply, httpx.Response(404, json=no_results))

    pick = ask(client).json()["recommendations"][0]

    assert pick["brand"] == "Various"
    assert pick["purchaseLinks"]["amazon"] == (
        "https://www.amazon.com/s?k=tennis&tag=courtsfinder-20"
    )


def test_without_credentials_amazon_is_not_called(client, upstream, settings):
    settings.AMAZON_SECRET_ACCESS_KEY = None
    upstream.responder = route_by_host(CLAUDE_JSON, httpx.Response(500))

    pick = ask(client).json()["recommendations"][0]

    assert pick["purchaseLinks"]["amazon"].startswith("https://www.amazon.com/s?k=")
    assert amazon_keywords(upstream) == []
