"""Court endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from courts_finder.api.deps import get_search_engine
from courts_finder.core.errors import (
    MissingParametersError,
    ServiceError,
    to_http_exception,
)
from courts_finder.schemas.booking import BookingRequest, BookingResponse
from courts_finder.schemas.court import (
    Coordinates,
    Court,
    CourtListResponse,
    FilterOptions,
    SearchFilters,
)
from courts_finder.services.booking_service import booking_service
from courts_finder.services.court_repository import CourtRepository, get_court_repository
from courts_finder.services.court_search import CourtSearchEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courts", tags=["courts"])


@router.get("", response_model=CourtListResponse)
async def list_courts(
    response: Response,
    sport: Optional[str] = Query(default=None, description="Sport, case-insensitive ('all' for any)"),
    location: Optional[str] = Query(default=None, description="Substring of the address"),
    available: Optional[bool] = None,
    indoor: Optional[bool] = None,
    min_rating: Optional[float] = Query(default=None, ge=0, le=5),
    max_price: Optional[float] = Query(default=None, ge=0),
    lat: Optional[float] = Query(default=None, ge=-90, le=90),
    lng: Optional[float] = Query(default=None, ge=-180, le=180),
    radius: Optional[float] = Query(default=None, gt=0, description="Radius in km"),
    sort_by: Optional[str] = Query(default=None, pattern="^(distance|rating|price)$"),
    limit: Optional[int] = Query(default=None, ge=1),
    engine: CourtSearchEngine = Depends(get_search_engine),
):
    """
    List courts from the local dataset.

    Every supplied filter must match. A radius filter needs both lat and lng;
    when a center is supplied each court carries its distance in km.

    Returns:
        Matching courts and their count
    """
    center = None
    if lat is not None and lng is not None:
        center = Coordinates(lat=lat, lng=lng)
    elif lat is not None or lng is not None or radius is not None or sort_by == "distance":
        missing = [name for name, value in (("lat", lat), ("lng", lng)) if value is None]
        raise to_http_exception(MissingParametersError(missing))

    filters = SearchFilters(
        sport=sport,
        location=location,
        available=available,
        indoor=indoor,
        min_rating=min_rating,
        max_price=max_price,
        center=center,
        radius_km=radius,
        sort_by=sort_by,
        limit=limit,
    )

    try:
        result = engine.search(filters)
    except Exception as e:
        logger.exception("Error searching courts")
        raise HTTPException(status_code=500, detail=f"Failed to fetch courts: {str(e)}")

    response.headers["Cache-Control"] = "no-cache"
    return CourtListResponse(courts=result.courts, total=result.total)


@router.get("/filters", response_model=FilterOptions)
async def get_filter_options(engine: CourtSearchEngine = Depends(get_search_engine)):
    """Distinct sports, surfaces, amenities and price range in the dataset."""
    return engine.filter_options()


@router.get("/suggestions", response_model=List[str])
async def get_suggestions(
    q: str = Query(..., min_length=1, description="Partial search text"),
    limit: int = Query(default=5, ge=1, le=20),
    engine: CourtSearchEngine = Depends(get_search_engine),
):
    """Autocomplete suggestions from court names, addresses and sports."""
    return engine.suggestions(q, limit)


@router.get("/{court_id}", response_model=Court)
async def get_court(
    court_id: int,
    repository: CourtRepository = Depends(get_court_repository),
):
    """
    Get a specific court by ID.

    Args:
        court_id: Court ID

    Returns:
        Court details
    """
    court = repository.get(court_id)
    if not court:
        raise HTTPException(status_code=404, detail="Court not found")
    return court


@router.post("/{court_id}/book", response_model=BookingResponse)
async def book_court(court_id: str, booking_request: BookingRequest):
    """
    Book a court (mock, nothing is stored).

    The price is the court's hourly rate times the booking duration.

    Args:
        court_id: Court ID
        booking_request: date, startTime, endTime and optional userId

    Returns:
        Confirmed booking
    """
    try:
        booking = booking_service.create_booking(court_id, booking_request)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Booking error")
        raise HTTPException(status_code=500, detail=f"Failed to book court: {str(e)}")

    return BookingResponse(booking=booking)
