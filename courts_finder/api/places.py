"""Google Places proxy endpoints.

Query parameters are checked before the API key, so a request missing both
gets the 400.
"""
import logging
from typing import Any, Awaitable, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from courts_finder.api.deps import get_google_places_client
from courts_finder.core.errors import (
    InvalidRequestError,
    ServiceError,
    require_params,
    to_http_exception,
)
from courts_finder.services.google_places import GooglePlacesClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/places", tags=["places"])


async def _relay(call: Awaitable[Any], failure: str) -> Any:
    try:
        return await call
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(failure)
        raise HTTPException(status_code=500, detail=f"{failure}: {str(e)}")


@router.get("/nearby")
async def nearby_places(
    latitude: Optional[str] = None,
    longitude: Optional[str] = None,
    radius: str = Query(default="5000", description="Radius in meters"),
    type: str = Query(default="sports_complex", description="Google place type"),
    keyword: Optional[str] = None,
    client: GooglePlacesClient = Depends(get_google_places_client),
):
    """
    Proxy a Places Nearby Search.

    Args:
        latitude: Center latitude (required)
        longitude: Center longitude (required)
        radius: Radius in meters
        type: Place type filter
        keyword: Optional keyword

    Returns:
        Google's response body
    """
    try:
        require_params(latitude=latitude, longitude=longitude)
    except ServiceError as e:
        raise to_http_exception(e)

    return await _relay(
        client.nearby_search(latitude, longitude, radius, type, keyword),
        "Failed to fetch places data",
    )


@router.get("/textsearch")
async def text_search(
    query: Optional[str] = None,
    client: GooglePlacesClient = Depends(get_google_places_client),
):
    """
    Proxy a Places Text Search.

    This searches Google, not the local court dataset (see ``GET /courts``).

    Returns:
        List of places (empty when Google has no results)
    """
    try:
        require_params(query=query)
    except ServiceError as e:
        raise to_http_exception(e)

    return await _relay(client.text_search(query), "Failed to search places")


@router.get("/geocode")
async def geocode(
    latlng: Optional[str] = None,
    address: Optional[str] = None,
    client: GooglePlacesClient = Depends(get_google_places_client),
):
    """
    Proxy a forward (address) or reverse (latlng) geocode.

    Returns:
        Google's response body
    """
    if not latlng and not address:
        error = InvalidRequestError("Either latlng or address parameter is required")
        raise to_http_exception(error)

    return await _relay(
        client.geocode(latlng=latlng, address=address),
        "Failed to fetch geocoding data",
    )


@router.get("/directions")
async def directions(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    mode: str = "driving",
    units: str = "imperial",
    avoid: Optional[str] = None,
    client: GooglePlacesClient = Depends(get_google_places_client),
):
    """
    Proxy a Directions request.

    Returns:
        Google's response body
    """
    try:
        require_params(origin=origin, destination=destination)
    except ServiceError as e:
        raise to_http_exception(e)

    return await _relay(
        client.directions(origin, destination, mode, units, avoid),
        "Failed to fetch directions data",
    )


@router.get("/details")
async def place_details(
    place_id: Optional[str] = Query(default=None, alias="placeId"),
    fields: Optional[str] = None,
    client: GooglePlacesClient = Depends(get_google_places_client),
):
    """
    Proxy a Place Details request.

    Returns:
        Google's response body
    """
    try:
        require_params(placeId=place_id)
    except ServiceError as e:
        raise to_http_exception(e)

    return await _relay(
        client.place_details(place_id, fields), "Failed to fetch place details"
    )


@router.get("/business-profile")
async def business_profile(
    place_id: Optional[str] = Query(default=None, alias="placeId"),
    client: GooglePlacesClient = Depends(get_google_places_client),
):
    """
    Place details summarized for a sports facility.

    Returns:
        Details plus amenities, hours, accessibility, price range and facility type
    """
    try:
        require_params(placeId=place_id)
    except ServiceError as e:
        raise to_http_exception(e)

    return await _relay(
        client.business_profile(place_id), "Failed to fetch business profile"
    )
