"""Tests for the free-text court search endpoint."""
import httpx
import pytest

GOOGLE_RESULTS = {
    "status": "OK",
    "results": [
        {
            "place_id": "g-dup",
            "name": "Downtown Tennis Center",
            "formatted_address": "123 Main St, Hickory, NC 28601",
            "geometry": {"location": {"lat": 35.7331, "lng": -81.3412}},
        },
        {
            "place_id": "g-paris",
            "name": "Paris Tennis Club",
            "formatted_address": "1 Rue de Rivoli, Paris",
            "geometry": {"location": {"lat": 48.86, "lng": 2.35}},
            "rating": 4.6,
        },
    ],
}

FOURSQUARE_RESULTS = {
    "results": [
        {
            "fsq_id": "fsq-1",
            "name": "Seine Courts",
            "location": {"address": "2 Quai de la Seine", "locality": "Paris", "country": "FR"},
            "geocodes": {"main": {"latitude": 48.88, "longitude": 2.37}},
            "categories": [{"name": "Tennis Court"}],
            "rating": 8.6,
        },
        {"fsq_id": "fsq-2", "name": "Paris Tennis Club", "location": {"formatted_address": "1 Rue de Rivoli, Paris"}},
    ]
}


def route_by_host(google=None, foursquare=None):
    def responder(request: httpx.Request) -> httpx.Response:
        if request.url.host == "maps.googleapis.com":
            return google or httpx.Response(200, json=GOOGLE_RESULTS)
        if request.url.host == "api.foursquare.com":
            return foursquare or httpx.Response(200, json=FOURSQUARE_RESULTS)
        return httpx.Response(404)
    return responder


def court_ids(data):
    return [court["id"] for court in data["courts"]]


class TestLocalRanking:
    def test_ranked_by_relevance(self, client, upstream):
        response = client.get("/search", params={"query": "tennis"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert court_ids(data)[:2] == [1, 5]
        assert data["courts"][0]["score"] == pytest.approx(4.2)
        assert data["courts"][0]["matchedFields"] == ["name", "sport"]
        assert data["total"] == len(data["courts"]) + len(data["external"])

    def test_q_is_an_alias(self, client, upstream):
        by_query = client.get("/search", params={"query": "pickleball"}).json()
        by_q = client.get("/search", params={"q": "pickleball"}).json()
        assert court_ids(by_q) == court_ids(by_query)
        assert court_ids(by_q)[0] == 3

    def test_empty_query_lists_everything(self, client):
        data = client.get("/search").json()
        assert court_ids(data) == [1, 2, 3, 4, 5, 6]
        assert data["external"] == []

    def test_location_alias(self, client):
        assert len(client.get("/search", params={"location": "hky"}).json()["courts"]) == 6
        assert client.get("/search", params={"location": "charlotte"}).json()["courts"] == []

    def test_sport_filter(self, client):
        data = client.get("/search", params={"sport": "Basketball"}).json()
        assert court_ids(data) == [2, 6]

    def test_not_cached(self, client):
        assert client.get("/search").headers["cache-control"] == "no-cache"


class TestOutsideSources:
    def test_north_carolina_queries_stay_local(self, client, upstream):
        upstream.responder = route_by_host()
        client.get("/search", params={"query": "hickory tennis"})
        assert upstream.requests == []

    def test_merges_google_and_foursquare(self, client, upstream):
        upstream.responder = route_by_host()

        data = client.get("/search", params={"query": "lyon"}).json()

        assert [court["id"] for court in data["external"]] == ["g-dup", "g-paris", "fsq-1"]
        seine = data["external"][2]
        assert seine == {
            "id": "fsq-1",
            "name": "Seine Courts",
            "sport": "tennis",
            "address": "2 Quai de la Seine, Paris, FR",
            "coordinates": {"lat": 48.88, "lng": 2.37},
            "rating": 4.3,
            "source": "foursquare",
        }
        assert data["external"][1]["source"] == "google_places"
        hosts = {request.url.host for request in upstream.requests}
        assert hosts == {"maps.googleapis.com", "api.foursquare.com"}

    def test_duplicates_of_local_courts_are_dropped(self, client, upstream):
        upstream.responder = route_by_host()

        data = client.get("/search", params={"query": "downtown tennis center"}).json()

        assert court_ids(data).count(1) == 1
        assert [court["id"] for court in data["external"]] == ["g-paris", "fsq-1"]
        assert data["total"] == len(data["courts"]) + 2

    def test_sport_narrows_google_query(self, client, upstream):
        upstream.responder = route_by_host()
        client.get("/search", params={"query": "lyon", "sport": "tennis"})

        google = [r for r in upstream.requests if r.url.host == "maps.googleapis.com"][0]
        assert google.url.params["query"] == "tennis courts in lyon"

    def test_failing_source_is_skipped(self, client, upstream):
        upstream.responder = route_by_host(
            google=httpx.Response(500, json={"error_message": "boom"})
        )

        response = client.get("/search", params={"query": "paris"})

        assert response.status_code == 200
        assert [court["id"] for court in response.json()["external"]] == ["fsq-1", "fsq-2"]

    def test_unconfigured_sources_are_skipped(self, unconfigured):
        data = unconfigured.get("/search", params={"query": "paris"}).json()
        assert data["external"] == []
