"""Tests for the court, booking and sport endpoints."""
import pytest


def court_ids(response):
    return [court["id"] for court in response.json()["courts"]]


class TestListCourts:
    def test_returns_every_court(self, client):
        response = client.get("/courts")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 6
        assert len(data["courts"]) == 6
        assert response.headers["cache-control"] == "no-cache"

    def test_courts_use_camel_case_fields(self, client):
        court = client.get("/courts").json()["courts"][0]
        assert court["pricePerHour"] == 25
        assert court["coordinates"] == {"lat": 35.7344, "lng": -81.3412}

    @pytest.mark.parametrize("sport", ["tennis", "Tennis", "TENNIS"])
    def test_sport_filter(self, client, sport):
        assert court_ids(client.get("/courts", params={"sport": sport})) == [1, 5]

    def test_sport_all(self, client):
        assert client.get("/courts", params={"sport": "all"}).json()["total"] == 6

    def test_location_filter(self, client):
        assert court_ids(client.get("/courts", params={"location": "oak"})) == [2]

    def test_every_address_is_in_hickory(self, client):
        assert client.get("/courts", params={"location": "hickory"}).json()["total"] == 6

    def test_available_filter(self, client):
        assert court_ids(client.get("/courts", params={"available": "false"})) == [3]

    def test_unknown_sport_is_empty_success(self, client):
        response = client.get("/courts", params={"sport": "curling"})
        assert response.status_code == 200
        assert response.json()["courts"] == []
        assert response.json()["total"] == 0

    def test_radius_filter(self, client):
        params = {"lat": 35.7344, "lng": -81.3412, "radius": 1}
        response = client.get("/courts", params=params)
        assert response.status_code == 200
        courts = response.json()["courts"]
        assert courts
        for court in courts:
            assert court["distance"] <= 1

    def test_sort_by_distance(self, client):
        params = {"lat": 35.7344, "lng": -81.3412, "sort_by": "distance"}
        courts = client.get("/courts", params=params).json()["courts"]
        assert courts[0]["id"] == 1
        distances = [court["distance"] for court in courts]
        assert distances == sorted(distances)

    def test_sort_by_price_with_limit(self, client):
        response = client.get("/courts", params={"sort_by": "price", "limit": 2})
        assert court_ids(response) == [6, 2]

    def test_radius_without_center(self, client):
        response = client.get("/courts", params={"radius": 5})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "MISSING_PARAMETERS"
        assert detail["missing"] == ["lat", "lng"]

    def test_latitude_without_longitude(self, client):
        response = client.get("/courts", params={"lat": 35.7})
        assert response.status_code == 400
        assert response.json()["detail"]["missing"] == ["lng"]

    def test_invalid_radius(self, client):
        params = {"lat": 35.7, "lng": -81.3, "radius": -1}
        assert client.get("/courts", params=params).status_code == 422


class TestCourtLookups:
    def test_get_court(self, client):
        response = client.get("/courts/4")
        assert response.status_code == 200
        assert response.json()["name"] == "Hickory Sports Complex"

    def test_get_unknown_court(self, client):
        response = client.get("/courts/99")
        assert response.status_code == 404
        assert response.json()["detail"] == "Court not found"

    def test_suggestions(self, client):
        response = client.get("/courts/suggestions", params={"q": "tennis"})
        assert response.status_code == 200
        assert response.json() == [
            "Downtown Tennis Center",
            "tennis",
            "Lenoir-Rhyne Tennis Courts",
        ]

    def test_filter_options(self, client):
        data = client.get("/courts/filters").json()
        assert "pickleball" in data["sports"]
        assert sorted(data) == ["amenities", "priceRange", "sortOptions", "sports", "surfaces"]
        assert data["priceRange"] == {"min": 12, "max": 35}
        assert data["sortOptions"] == ["distance", "rating", "price"]


class TestBooking:
    def book(self, client, court_id, **body):
        return client.post(f"/courts/{court_id}/book", json=body)

    def test_two_hours_on_court_one(self, client):
        response = self.book(
            client, 1, date="2025-07-01", startTime="10:00", endTime="12:00"
        )
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Court booked successfully!"
        booking = data["booking"]
        assert booking["totalPrice"] == 50
        assert booking["courtId"] == "1"
        assert booking["userId"] == "guest_user"
        assert booking["status"] == "confirmed"
        assert booking["id"].startswith("booking_")

    def test_half_hour_rounds_half_up(self, client):
        response = self.book(
            client, 1, date="2025-07-01", startTime="10:00", endTime="10:30"
        )
        assert response.json()["booking"]["totalPrice"] == 13

    def test_unknown_court_uses_default_rate(self, client):
        response = self.book(
            client, 99, date="2025-07-01", startTime="10:00", endTime="11:30"
        )
        assert response.status_code == 200
        assert response.json()["booking"]["totalPrice"] == 30

    def test_user_id_is_kept(self, client):
        response = self.book(
            client, 2, date="2025-07-01", startTime="09:00", endTime="10:00",
            userId="user-7",
        )
        assert response.json()["booking"]["userId"] == "user-7"

    def test_missing_fields(self, client):
        response = self.book(client, 1, date="2025-07-01", startTime="10:00")
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Missing required booking information"

    def test_end_before_start(self, client):
        response = self.book(
            client, 1, date="2025-07-01", startTime="12:00", endTime="10:00"
        )
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "endTime must be after startTime"

    def test_bad_time_format(self, client):
        response = self.book(
            client, 1, date="2025-07-01", startTime="ten", endTime="11:00"
        )
        assert response.status_code == 400


def test_sports(client):
    response = client.get("/sports")
    assert response.status_code == 200
    sports = response.json()
    assert len(sports) == 6
    assert {sport["id"] for sport in sports} >= {"tennis", "pickleball"}
