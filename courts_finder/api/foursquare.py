"""Foursquare proxy endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from courts_finder.api.deps import get_foursquare_client
from courts_finder.core.errors import ServiceError, require_params, to_http_exception
from courts_finder.services.foursquare import FoursquareClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/foursquare", tags=["foursquare"])


@router.get("/search")
async def search_venues(
    query: Optional[str] = None,
    near: Optional[str] = None,
    client: FoursquareClient = Depends(get_foursquare_client),
):
    """
    Search sports venues on Foursquare.

    Args:
        query: Search text (required)
        near: Optional locality

    Returns:
        Foursquare's response body
    """
    try:
        require_params(query=query)
        return await client.search(query, near)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Foursquare search proxy error")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
