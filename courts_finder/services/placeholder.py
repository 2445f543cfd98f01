"""SVG placeholder images for products without a picture."""
from typing import Tuple

from courts_finder.core.errors import InvalidRequestError

MAX_DIMENSION = 1000


def parse_dimensions(dimensions: str) -> Tuple[int, int]:
    """Parse ``"<width>x<height>"``; both sides must be within 1..1000."""
    parts = dimensions.lower().split("x")
    try:
        width, height = (int(part) for part in parts)
    except ValueError:
        raise InvalidRequestError("Invalid dimensions")

    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise InvalidRequestError("Invalid dimensions")
    return width, height


def render_placeholder_svg(width: int, height: int) -> str:
    return f"""<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">
  <rect width="100%" height="100%" fill="#f3f4f6"/>
  <rect x="20%" y="20%" width="60%" height="60%" fill="#e5e7eb" rx="8"/>
  <g transform="translate({width / 2}, {height / 2})">
    <svg x="-16" y="-16" width="32" height="32" fill="#9ca3af" viewBox="0 0 24 24">
      <path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M16 11V7a4 4 0 00-8 0v4M5 9h14l1 12H4L5 9z" />
    </svg>
  </g>
  <text x="50%" y="75%" text-anchor="middle" fill="#6b7280" font-family="Arial, sans-serif" font-size="12">
    Product Image
  </text>
</svg>
"""
