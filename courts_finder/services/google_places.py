"""Google Maps Platform client.

Proxies the Places (nearby, text search, details), Geocoding and Directions
web services. Google reports most failures with HTTP 200 and a non-``OK``
``status`` field; those are mapped to a 400 carrying the upstream body.
"""
import logging
from typing import Any, Dict, List, Optional

from courts_finder.core.errors import UpstreamError
from courts_finder.services.upstream import UpstreamClient

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = ("OK", "ZERO_RESULTS")

DEFAULT_DETAIL_FIELDS = ",".join([
    "place_id",
    "name",
    "formatted_address",
    "rating",
    "user_ratings_total",
    "reviews",
    "photos",
    "opening_hours",
    "formatted_phone_number",
    "website",
    "geometry",
    "types",
    "business_status",
    "price_level",
    "wheelchair_accessible_entrance",
    "reservable",
    "current_opening_hours",
    "editorial_summary",
])

BUSINESS_PROFILE_FIELDS = ",".join([
    "place_id",
    "name",
    "formatted_address",
    "rating",
    "user_ratings_total",
    "reviews",
    "photos",
    "opening_hours",
    "current_opening_hours",
    "secondary_opening_hours",
    "formatted_phone_number",
    "international_phone_number",
    "website",
    "url",
    "geometry",
    "types",
    "business_status",
    "price_level",
    "wheelchair_accessible_entrance",
    "editorial_summary",
    "delivery",
    "dine_in",
    "takeout",
    "reservable",
    "serves_beer",
    "serves_wine",
    "serves_breakfast",
    "serves_lunch",
    "serves_dinner",
    "serves_vegetarian_food",
])

PRICE_LEVEL_LABELS = {
    0: "Free",
    1: "Inexpensive ($)",
    2: "Moderate ($$)",
    3: "Expensive ($$$)",
    4: "Very Expensive ($$$$)",
}

# First matching place type wins
FACILITY_TYPES = [
    ("tennis_court", "tennis"),
    ("basketball_court", "basketball"),
    ("sports_complex", "multi-sport"),
    ("recreation_center", "recreation"),
    ("country_club", "country_club"),
    ("gym", "fitness"),
    ("park", "park"),
]

SERVICE_AMENITIES = [
    ("delivery", "delivery"),
    ("dine_in", "dining"),
    ("takeout", "takeout"),
    ("reservable", "reservations"),
    ("serves_breakfast", "breakfast"),
    ("serves_lunch", "lunch"),
    ("serves_dinner", "dinner"),
    ("serves_vegetarian_food", "vegetarian_options"),
    ("wheelchair_accessible_entrance", "wheelchair_accessible"),
]

TYPE_AMENITIES = [
    ("parking", "parking"),
    ("gym", "fitness_center"),
    ("spa", "spa"),
    ("swimming_pool", "swimming_pool"),
]


def extract_amenities(place: Dict[str, Any]) -> List[str]:
    """Derive amenity tags from a place's service flags and types."""
    amenities = [tag for field, tag in SERVICE_AMENITIES if place.get(field)]
    if place.get("serves_beer") or place.get("serves_wine"):
        amenities.append("bar")

    types = place.get("types") or []
    for place_type, tag in TYPE_AMENITIES:
        if place_type in types:
            amenities.append(tag)
    return amenities


def format_operating_hours(hours: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not hours:
        return None
    return {
        "openNow": hours.get("open_now", False),
        "periods": hours.get("periods", []),
        "weekdayText": hours.get("weekday_text", []),
        "specialHours": hours.get("special_days", []),
    }


def price_level_label(price_level: Optional[int]) -> str:
    return PRICE_LEVEL_LABELS.get(price_level, "Unknown")


def facility_type(types: Optional[List[str]]) -> str:
    if not types:
        return "general"
    for place_type, label in FACILITY_TYPES:
        if place_type in types:
            return label
    return "general"


class GooglePlacesClient(UpstreamClient):
    """Client for the Google Maps web services."""

    provider_name = "Google Places"

    @property
    def api_key(self) -> Optional[str]:
        return self.settings.GOOGLE_PLACES_API_KEY

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        params = {key: value for key, value in params.items() if value not in (None, "")}
        params["key"] = self._require_api_key()

        data = await self._make_request(
            "GET", f"{self.settings.GOOGLE_MAPS_BASE_URL}/{path}", params=params
        )

        status = data.get("status")
        if status not in SUCCESS_STATUSES:
            logger.warning(f"Google API {path} returned status: {status}")
            raise UpstreamError(
                data.get("error_message") or f"Google Places API error: {status}",
                status_code=400,
                payload=data,
            )
        return data

    async def nearby_search(
        self,
        latitude: str,
        longitude: str,
        radius: str = "5000",
        place_type: str = "sports_complex",
        keyword: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Search for places around a point.

        Args:
            latitude: Center latitude
            longitude: Center longitude
            radius: Search radius in meters
            place_type: Google place type
            keyword: Optional keyword

        Returns:
            Google's response body
        """
        data = await self._get("place/nearbysearch/json", {
            "location": f"{latitude},{longitude}",
            "radius": radius,
            "type": place_type,
            "keyword": keyword,
        })
        logger.info(f"Found {len(data.get('results', []))} nearby places")
        return data

    async def text_search(self, query: str) -> List[Dict[str, Any]]:
        """Search places by free text and return only the result list."""
        data = await self._get("place/textsearch/json", {"query": query})
        places = data.get("results", [])
        logger.info(f"Found {len(places)} places for text search")
        return places

    async def geocode(
        self, latlng: Optional[str] = None, address: Optional[str] = None
    ) -> Dict[str, Any]:
        """Forward or reverse geocode; at least one argument is expected."""
        return await self._get("geocode/json", {"latlng": latlng, "address": address})

    async def directions(
        self,
        origin: str,
        destination: str,
        mode: str = "driving",
        units: str = "imperial",
        avoid: Optional[str] = None,
    ) -> Dict[str, Any]:
        data = await self._get("directions/json", {
            "origin": origin,
            "destination": destination,
            "mode": mode,
            "units": units,
            "avoid": avoid,
        })
        logger.info(f"Directions returned {len(data.get('routes', []))} routes")
        return data

    async def place_details(
        self, place_id: str, fields: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._get("place/details/json", {
            "place_id": place_id,
            "fields": fields or DEFAULT_DETAIL_FIELDS,
        })

    async def business_profile(self, place_id: str) -> Dict[str, Any]:
        """
        Fetch place details and add facility-oriented summaries.

        Args:
            place_id: Google place ID

        Returns:
            ``{"status": "OK", "result": ...}`` where the result carries the raw
            details plus amenities, hours, accessibility, price range and
            facility type
        """
        data = await self._get("place/details/json", {
            "place_id": place_id,
            "fields": BUSINESS_PROFILE_FIELDS,
        })
        place = data.get("result")
        if not place:
            raise UpstreamError(
                "Google Places API returned no details", status_code=400, payload=data
            )

        summary = place.get("editorial_summary") or {}
        profile = dict(place)
        profile.update({
            "amenities": extract_amenities(place),
            "operatingHours": format_operating_hours(place.get("opening_hours")),
            "currentHours": format_operating_hours(place.get("current_opening_hours")),
            "accessibility": {
                "wheelchairAccessible": bool(place.get("wheelchair_accessible_entrance")),
            },
            "priceRange": price_level_label(place.get("price_level")),
            "businessType": facility_type(place.get("types")),
            "facilitySummary": summary.get("overview"),
        })
        logger.info(f"Business profile retrieved for: {place.get('name')}")
        return {"status": "OK", "result": profile}
