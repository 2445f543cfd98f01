"""API schemas."""
from courts_finder.schemas.court import (
    Coordinates,
    Court,
    CourtMatch,
    SearchFilters,
    CourtListResponse,
    FilterOptions,
    ScoredCourt,
    ExternalCourt,
    CourtSearchResponse,
)
from courts_finder.schemas.booking import (
    BookingRequest,
    Booking,
    BookingResponse,
)
from courts_finder.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    User,
    AuthResponse,
)
from courts_finder.schemas.sport import Sport
from courts_finder.schemas.gemini import GeminiRequest, GeminiResponse
from courts_finder.schemas.chat import (
    CourtContext,
    ChatRequest,
    ProductRecommendation,
    RecommendationResponse,
)

__all__ = [
    "Coordinates",
    "Court",
    "CourtMatch",
    "SearchFilters",
    "CourtListResponse",
    "FilterOptions",
    "ScoredCourt",
    "ExternalCourt",
    "CourtSearchResponse",
    "BookingRequest",
    "Booking",
    "BookingResponse",
    "LoginRequest",
    "RegisterRequest",
    "User",
    "AuthResponse",
    "Sport",
    "GeminiRequest",
    "GeminiResponse",
    "CourtContext",
    "ChatRequest",
    "ProductRecommendation",
    "RecommendationResponse",
]
