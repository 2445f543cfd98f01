"""Free-text court search endpoint."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from courts_finder.api.deps import get_court_finder
from courts_finder.core.errors import ServiceError, to_http_exception
from courts_finder.schemas.court import CourtSearchResponse
from courts_finder.services.court_finder import CourtFinder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=CourtSearchResponse)
async def search_courts(
    response: Response,
    query: Optional[str] = Query(default=None, description="Free text, e.g. 'tenis hickory'"),
    q: Optional[str] = Query(default=None, description="Alias of query"),
    sport: str = Query(default="all", description="Sport, case-insensitive ('all' for any)"),
    location: Optional[str] = Query(default=None, description="Place name or alias, e.g. 'hky'"),
    finder: CourtFinder = Depends(get_court_finder),
):
    """
    Search courts by relevance to free text.

    Unlike ``GET /courts`` this ranks courts with fuzzy matching, and queries
    outside North Carolina also search Google Places and Foursquare.

    Args:
        query: Search text (``q`` is accepted too)
        sport: Sport filter
        location: Location filter for local courts

    Returns:
        Ranked local courts followed by outside venues
    """
    try:
        result = await finder.search(query or q or "", sport, location)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error searching courts")
        raise HTTPException(status_code=500, detail=f"Failed to search courts: {str(e)}")

    response.headers["Cache-Control"] = "no-cache"
    return result
