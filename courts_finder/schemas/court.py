"""Court schemas."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List


class Coordinates(BaseModel):
    """Latitude/longitude pair in degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Court(BaseModel):
    """A bookable court from the static dataset."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    sport: str
    address: str
    coordinates: Optional[Coordinates] = None
    rating: float
    price_per_hour: float
    amenities: List[str] = Field(default_factory=list)
    surface: Optional[str] = None
    indoor: bool = False
    available: bool = True
    image: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


class CourtMatch(Court):
    """Court returned by a search, with its distance from the search center."""

    distance: Optional[float] = None  # km, only when a center was supplied


class SearchFilters(BaseModel):
    """Request-scoped search criteria. ``None`` fields are not applied."""

    sport: Optional[str] = None
    location: Optional[str] = None
    available: Optional[bool] = None
    indoor: Optional[bool] = None
    min_rating: Optional[float] = None
    max_price: Optional[float] = None
    center: Optional[Coordinates] = None
    radius_km: Optional[float] = Field(default=None, gt=0)
    sort_by: Optional[str] = Field(default=None, pattern="^(distance|rating|price)$")
    limit: Optional[int] = Field(default=None, ge=1)


class CourtListResponse(BaseModel):
    """Schema for the court list response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    courts: List[CourtMatch]
    total: int
    success: bool = True


class PriceRange(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    min: float
    max: float


class FilterOptions(BaseModel):
    """Distinct filter values present in the dataset."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sports: List[str]
    surfaces: List[str]
    amenities: List[str]
    price_range: Optional[PriceRange] = None
    sort_options: List[str] = ["distance", "rating", "price"]


class ScoredCourt(Court):
    """Local court ranked by free-text relevance."""

    score: float
    matched_fields: List[str] = Field(default_factory=list)


class ExternalCourt(BaseModel):
    """Court-like venue found through Google Places or Foursquare."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    sport: str
    address: str
    coordinates: Optional[Coordinates] = None
    rating: Optional[float] = None
    source: str  # google_places or foursquare


class CourtSearchResponse(BaseModel):
    """Free-text search results: ranked local courts, then outside venues."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    courts: List[ScoredCourt]
    external: List[ExternalCourt] = Field(default_factory=list)
    total: int
    success: bool = True
