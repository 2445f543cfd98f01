"""Placeholder image endpoint."""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from courts_finder.core.errors import ServiceError
from courts_finder.services.placeholder import parse_dimensions, render_placeholder_svg

router = APIRouter(prefix="/placeholder", tags=["placeholder"])


@router.get("/{dimensions}")
async def placeholder_image(dimensions: str):
    """
    Render an SVG placeholder, e.g. ``/placeholder/300x300``.

    Args:
        dimensions: ``<width>x<height>``, each between 1 and 1000
    """
    try:
        width, height = parse_dimensions(dimensions)
    except ServiceError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)

    return Response(
        content=render_placeholder_svg(width, height),
        media_type="image/svg+xml",
        headers={"Cache-Control": "public, max-age=31536000, immutable"},
    )
