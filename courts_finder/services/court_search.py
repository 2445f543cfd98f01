"""Court search over the local dataset.

Filters compose with logical AND; a filter left as ``None`` always passes.
Results keep dataset order unless a sort key is requested. Free-text
search ranks by relevance instead.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from courts_finder.core.geo import haversine_distance
from courts_finder.schemas.court import (
    Court,
    CourtMatch,
    FilterOptions,
    PriceRange,
    ScoredCourt,
    SearchFilters,
)
from courts_finder.services.court_repository import CourtRepository
from courts_finder.services.text_match import fuzzy_match_score, location_variants

logger = logging.getLogger(__name__)

Predicate = Callable[[Court], bool]

DISTANCE_DECIMALS = 2

# Free-text relevance: (minimum field score, weight) per field
NAME_MATCH = (0.3, 3.0)
LOCATION_MATCH = (0.3, 2.0)
SPORT_MATCH = (0.5, 1.5)
AMENITIES_MATCH = (0.3, 0.5)
MAX_SCORE = 5.0
MIN_RELEVANCE = 0.15


@dataclass
class CourtSearchResult:
    courts: List[CourtMatch]
    total: int


class CourtSearchEngine:
    """Filter, sort and suggest courts from a repository."""

    def __init__(self, repository: CourtRepository):
        self.repository = repository

    def search(self, filters: SearchFilters) -> CourtSearchResult:
        """
        Apply every active filter to the repository's courts.

        Args:
            filters: Search criteria

        Returns:
            Matching courts (with distances when a center was given) and their count
        """
        predicates = self._build_predicates(filters)

        matches = []
        for court in self.repository.list_all():
            if all(predicate(court) for predicate in predicates):
                matches.append(self._to_match(court, filters))

        if filters.sort_by:
            matches = self._sort(matches, filters.sort_by)

        if filters.limit is not None:
            matches = matches[: filters.limit]

        logger.info(f"Court search matched {len(matches)} courts")
        return CourtSearchResult(courts=matches, total=len(matches))

    def _build_predicates(self, filters: SearchFilters) -> List[Predicate]:
        predicates: List[Predicate] = []

        if filters.sport and filters.sport.lower() != "all":
            sport = filters.sport.lower()
            predicates.append(lambda court: court.sport.lower() == sport)

        if filters.location:
            location = filters.location.lower()
            predicates.append(lambda court: location in court.address.lower())

        if filters.available is not None:
            available = filters.available
            predicates.append(lambda court: court.available == available)

        if filters.indoor is not None:
            indoor = filters.indoor
            predicates.append(lambda court: court.indoor == indoor)

        if filters.min_rating is not None:
            min_rating = filters.min_rating
            predicates.append(lambda court: court.rating >= min_rating)

        if filters.max_price is not None:
            max_price = filters.max_price
            predicates.append(lambda court: court.price_per_hour <= max_price)

        if filters.radius_km is not None:
            if filters.center is None:
                raise ValueError("A radius filter requires a search center")
            center = filters.center
            radius = filters.radius_km

            def within_radius(court: Court) -> bool:
                if court.coordinates is None:
                    return False
                distance = haversine_distance(
                    center.lat, center.lng,
                    court.coordinates.lat, court.coordinates.lng,
                )
                return distance <= radius

            predicates.append(within_radius)

        return predicates

    def _to_match(self, court: Court, filters: SearchFilters) -> CourtMatch:
        distance = None
        if filters.center is not None and court.coordinates is not None:
            distance = haversine_distance(
                filters.center.lat, filters.center.lng,
                court.coordinates.lat, court.coordinates.lng,
            )
            # Display value only; the radius filter uses the exact distance
            distance = round(distance, DISTANCE_DECIMALS)
        return CourtMatch(**court.model_dump(), distance=distance)

    def _sort(self, matches: List[CourtMatch], sort_by: str) -> List[CourtMatch]:
        if sort_by == "distance":
            # Courts without a distance go last
            return sorted(
                matches,
                key=lambda m: (m.distance is None, m.distance or 0.0),
            )
        if sort_by == "rating":
            return sorted(matches, key=lambda m: m.rating, reverse=True)
        if sort_by == "price":
            return sorted(matches, key=lambda m: m.price_per_hour)
        raise ValueError(f"Unknown sort key: {sort_by}")

    def score(self, court: Court, query: str) -> ScoredCourt:
        """
        Score a court's relevance to a free-text query.

        Name, address (including known aliases of a place name), sport and
        amenities are matched separately and weighted; the total is capped at 5.

        Args:
            court: Court to score
            query: Free text typed by the user

        Returns:
            The court with its score and the fields that matched
        """
        total = 0.0
        matched_fields = []

        def add(field_name: str, value: float, rule) -> None:
            nonlocal total
            minimum, weight = rule
            if value > minimum:
                total += value * weight
                matched_fields.append(field_name)

        add("name", fuzzy_match_score(court.name, query), NAME_MATCH)
        add(
            "location",
            max(fuzzy_match_score(court.address, v) for v in location_variants(query)),
            LOCATION_MATCH,
        )
        add("sport", fuzzy_match_score(court.sport, query), SPORT_MATCH)
        if court.amenities:
            add("amenities", fuzzy_match_score(" ".join(court.amenities), query), AMENITIES_MATCH)

        return ScoredCourt(
            **court.model_dump(),
            score=min(total, MAX_SCORE),
            matched_fields=matched_fields,
        )

    def text_search(
        self,
        query: str,
        sport: Optional[str] = None,
        location: Optional[str] = None,
    ) -> List[ScoredCourt]:
        """
        Rank courts against a free-text query.

        An empty query matches every court with score 1. Otherwise courts
        scoring 0.15 or less are dropped and the rest are ordered by score,
        ties keeping dataset order.

        Args:
            query: Free text, e.g. "tenis hickory"
            sport: Exact sport filter ("all" for any)
            location: Place name; aliases such as "hky" for Hickory also match

        Returns:
            Ranked courts
        """
        courts = self.repository.list_all()
        if query.strip():
            matches = [self.score(court, query) for court in courts]
            matches = [m for m in matches if m.score > MIN_RELEVANCE]
            matches.sort(key=lambda m: m.score, reverse=True)
        else:
            matches = [ScoredCourt(**c.model_dump(), score=1.0) for c in courts]

        if sport and sport.lower() != "all":
            matches = [m for m in matches if m.sport.lower() == sport.lower()]

        if location and location.strip():
            variants = location_variants(location)
            matches = [
                m for m in matches
                if any(variant in m.address.lower() for variant in variants)
            ]

        logger.info(f"Text search for {query!r} matched {len(matches)} courts")
        return matches

    def suggestions(self, query: str, limit: int = 5) -> List[str]:
        """
        Suggest court names, address parts and sports containing the query.

        Args:
            query: Partial text typed by the user
            limit: Maximum number of suggestions

        Returns:
            Distinct suggestions in dataset order
        """
        needle = query.lower().strip()
        if not needle:
            return []

        suggestions: List[str] = []

        def add(value: str) -> None:
            if needle in value.lower() and value not in suggestions:
                suggestions.append(value)

        for court in self.repository.list_all():
            add(court.name)
            for part in court.address.split(","):
                add(part.strip())
            add(court.sport)

        return suggestions[:limit]

    def filter_options(self) -> FilterOptions:
        """Collect the distinct filter values present in the dataset."""
        courts = self.repository.list_all()

        def distinct(values) -> List[str]:
            seen: List[str] = []
            for value in values:
                if value and value not in seen:
                    seen.append(value)
            return seen

        prices = [court.price_per_hour for court in courts]
        return FilterOptions(
            sports=distinct(court.sport for court in courts),
            surfaces=distinct(court.surface for court in courts),
            amenities=distinct(a for court in courts for a in court.amenities),
            price_range=PriceRange(min=min(prices), max=max(prices)) if prices else None,
        )
