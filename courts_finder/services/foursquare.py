"""Foursquare Places search client."""
import logging
from typing import Any, Dict, Optional

from courts_finder.services.upstream import UpstreamClient

logger = logging.getLogger(__name__)

SEARCH_FIELDS = "name,location,rating,price,photos,hours,website,tel,categories"
SEARCH_LIMIT = 50


class FoursquareClient(UpstreamClient):
    """Client for the Foursquare Places API (v3)."""

    provider_name = "Foursquare"

    @property
    def api_key(self) -> Optional[str]:
        return self.settings.FOURSQUARE_API_KEY

    async def search(self, query: str, near: Optional[str] = None) -> Dict[str, Any]:
        """
        Search venues by text.

        Args:
            query: Search text, e.g. "tennis court"
            near: Optional locality, e.g. "Hickory, NC"

        Returns:
            Foursquare's response body
        """
        api_key = self._require_api_key()

        params = {"query": query, "limit": SEARCH_LIMIT, "fields": SEARCH_FIELDS}
        if near:
            params["near"] = near

        logger.info(f"Searching Foursquare for: {query!r}" + (f" near {near}" if near else ""))

        data = await self._make_request(
            "GET",
            f"{self.settings.FOURSQUARE_BASE_URL}/places/search",
            params=params,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            },
        )
        logger.info(f"Foursquare found {len(data.get('results', []))} places")
        return data
