"""Free-text court search across the local dataset and outside directories.

Local courts are always ranked. Queries that do not look like North Carolina
places also go to Google Places and Foursquare; an outside source that is
unconfigured or failing is skipped.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from courts_finder.core.errors import ServiceError
from courts_finder.schemas.court import (
    Coordinates,
    CourtSearchResponse,
    ExternalCourt,
    ScoredCourt,
)
from courts_finder.services.court_search import CourtSearchEngine
from courts_finder.services.foursquare import FoursquareClient
from courts_finder.services.google_places import GooglePlacesClient
from courts_finder.services.text_match import is_north_carolina_query

logger = logging.getLogger(__name__)

KNOWN_SPORTS = ("tennis", "basketball", "pickleball", "volleyball", "badminton", "squash")

# Extra words sent to Foursquare per sport
FOURSQUARE_SPORT_KEYWORDS = {
    "tennis": ["tennis", "tennis court", "racquet"],
    "basketball": ["basketball", "basketball court", "hoop"],
    "pickleball": ["pickleball", "paddle tennis", "racquet"],
    "multi-sport": ["sports", "recreation", "athletic"],
    "all": ["tennis", "basketball", "pickleball", "sports", "recreation", "court"],
}


def infer_sport(*texts: Optional[str]) -> str:
    """First known sport named in any of the texts, else multi-sport."""
    for text in texts:
        lower = (text or "").lower()
        for sport in KNOWN_SPORTS:
            if sport in lower:
                return sport
    return "multi-sport"


def _court_key(name: str, address: str) -> Tuple[str, str]:
    return name.lower().strip(), address.lower().strip()


def remove_duplicates(
    local: List[ScoredCourt], external: List[ExternalCourt]
) -> Tuple[List[ScoredCourt], List[ExternalCourt]]:
    """Keep the first court per (name, address); local courts come first."""
    seen = set()

    def first_seen(name: str, address: str) -> bool:
        key = _court_key(name, address)
        if key in seen:
            return False
        seen.add(key)
        return True

    unique_local = [c for c in local if first_seen(c.name, c.address)]
    unique_external = [c for c in external if first_seen(c.name, c.address)]
    return unique_local, unique_external


def google_place_to_court(place: Dict[str, Any], sport: Optional[str]) -> Optional[ExternalCourt]:
    if not place.get("place_id") or not place.get("name"):
        return None

    location = (place.get("geometry") or {}).get("location") or {}
    coordinates = None
    if location.get("lat") is not None and location.get("lng") is not None:
        coordinates = Coordinates(lat=location["lat"], lng=location["lng"])

    return ExternalCourt(
        id=place["place_id"],
        name=place["name"],
        sport=sport or infer_sport(place["name"], " ".join(place.get("types") or [])),
        address=place.get("formatted_address") or place.get("vicinity") or "",
        coordinates=coordinates,
        rating=place.get("rating"),
        source="google_places",
    )


def foursquare_place_to_court(place: Dict[str, Any], sport: Optional[str]) -> Optional[ExternalCourt]:
    place_id = place.get("fsq_id") or place.get("fsq_place_id")
    if not place_id or not place.get("name"):
        return None

    location = place.get("location") or {}
    address = location.get("formatted_address") or ", ".join(
        part for part in (
            location.get("address"),
            location.get("locality"),
            location.get("region"),
            location.get("country"),
        ) if part
    )

    point = (place.get("geocodes") or {}).get("main") or location
    coordinates = None
    if point.get("latitude") is not None and point.get("longitude") is not None:
        coordinates = Coordinates(lat=point["latitude"], lng=point["longitude"])

    categories = place.get("categories") or []
    category = categories[0].get("name") if categories else None

    # Foursquare rates on a 0-10 scale
    rating = place.get("rating")
    return ExternalCourt(
        id=str(place_id),
        name=place["name"],
        sport=sport or infer_sport(category, place["name"]),
        address=address,
        coordinates=coordinates,
        rating=round(rating / 2, 1) if isinstance(rating, (int, float)) else None,
        source="foursquare",
    )


class CourtFinder:
    """Combines ranked local courts with Google Places and Foursquare venues."""

    def __init__(
        self,
        engine: CourtSearchEngine,
        places: GooglePlacesClient,
        foursquare: FoursquareClient,
    ):
        self.engine = engine
        self.places = places
        self.foursquare = foursquare

    async def search(
        self,
        query: str = "",
        sport: Optional[str] = None,
        location: Optional[str] = None,
    ) -> CourtSearchResponse:
        """
        Search courts by free text.

        Args:
            query: Free text; empty returns every local court
            sport: Sport filter ("all" for any)
            location: Place-name filter for local courts

        Returns:
            Ranked local courts and de-duplicated outside venues
        """
        local = self.engine.text_search(query, sport, location)

        external: List[ExternalCourt] = []
        if query.strip() and not is_north_carolina_query(query):
            sport_filter = sport if sport and sport.lower() != "all" else None
            external = await self._google_courts(query, sport_filter)
            external += await self._foursquare_courts(query, sport_filter)

        courts, external = remove_duplicates(local, external)
        logger.info(
            f"Court search for {query!r}: {len(courts)} local, {len(external)} external"
        )
        return CourtSearchResponse(
            courts=courts, external=external, total=len(courts) + len(external)
        )

    async def _google_courts(self, query: str, sport: Optional[str]) -> List[ExternalCourt]:
        if not self.places.is_configured:
            return []
        try:
            places = await self.places.text_search(f"{sport or 'sports'} courts in {query}")
        except ServiceError as e:
            logger.warning(f"Google Places court search failed: {e.message}")
            return []
        courts = [google_place_to_court(place, sport) for place in places]
        return [court for court in courts if court]

    async def _foursquare_courts(self, query: str, sport: Optional[str]) -> List[ExternalCourt]:
        if not self.foursquare.is_configured:
            return []
        keywords = FOURSQUARE_SPORT_KEYWORDS.get(sport or "all", FOURSQUARE_SPORT_KEYWORDS["all"])
        try:
            data = await self.foursquare.search(f"{query} {' '.join(keywords)}")
        except ServiceError as e:
            logger.warning(f"Foursquare court search failed: {e.message}")
            return []
        courts = [foursquare_place_to_court(place, sport) for place in data.get("results", [])]
        return [court for court in courts if court]
