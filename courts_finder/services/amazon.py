"""Amazon affiliate links and Product Advertising API (PA-API 5) search.

SearchItems requests are signed with AWS Signature Version 4. Without
credentials the client reports itself unconfigured and callers fall back to
plain affiliate search links.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from courts_finder.core.errors import ConfigurationError, UpstreamError
from courts_finder.services.upstream import UpstreamClient

logger = logging.getLogger(__name__)

AMAZON_SEARCH_URL = "https://www.amazon.com/s"
AMAZON_PRODUCT_URL = "https://www.amazon.com/dp"

PLACEHOLDER_IMAGES = {
    "tennis": "https://images.unsplash.com/photo-1551698618-1dfe5d97d256?w=300&h=300&fit=crop",
    "basketball": "https://images.unsplash.com/photo-1546519638-68e109498ffc?w=300&h=300&fit=crop",
    "pickleball": "https://images.unsplash.com/photo-1626224583764-f87db24ac4ea?w=300&h=300&fit=crop",
    "volleyball": "https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=300&h=300&fit=crop",
    "sports": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=300&h=300&fit=crop",
}

PAAPI_SERVICE = "ProductAdvertisingAPI"
SEARCH_ITEMS_PATH = "/paapi5/searchitems"
SEARCH_ITEMS_TARGET = "com.amazon.paapi5.v1.ProductAdvertisingAPIv1.SearchItems"
MAX_ITEM_COUNT = 10

SEARCH_RESOURCES = [
    "Images.Primary.Medium",
    "ItemInfo.Title",
    "ItemInfo.Features",
    "ItemInfo.ByLineInfo",
    "Offers.Listings.Price",
    "CustomerReviews.Count",
    "CustomerReviews.StarRating",
]

# Keyword prefix per sport
SPORT_KEYWORDS = {
    "basketball": "Basketball",
    "tennis": "Tennis",
    "volleyball": "Volleyball",
    "pickleball": "Pickleball",
    "badminton": "Badminton",
    "squash": "Racquetball",
    "handball": "Handball",
    "multi-sport": "Sports",
}

UNSPECIFIED = "Not specified"


def affiliate_search_link(query: str, associate_id: str) -> str:
    """Amazon search URL for ``query`` tagged with the associate id."""
    return f"{AMAZON_SEARCH_URL}?k={quote(query.strip(), safe='')}&tag={associate_id}"


def product_link(asin: str, associate_id: str) -> str:
    return f"{AMAZON_PRODUCT_URL}/{asin}?tag={associate_id}"


def placeholder_image(category: str) -> str:
    return PLACEHOLDER_IMAGES.get((category or "").lower(), PLACEHOLDER_IMAGES["sports"])


@dataclass
class AmazonProduct:
    asin: str
    title: str
    url: str
    brand: Optional[str] = None
    price: Optional[str] = None
    image_url: Optional[str] = None
    star_rating: Optional[float] = None
    review_count: Optional[int] = None
    features: List[str] = field(default_factory=list)

    @property
    def rating_text(self) -> Optional[str]:
        if self.star_rating is None:
            return None
        if self.review_count is None:
            return f"{self.star_rating}/5 stars"
        return f"{self.star_rating}/5 stars ({self.review_count} reviews)"


def _display_value(node: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def parse_item(item: Dict[str, Any], associate_id: str) -> Optional[AmazonProduct]:
    """Convert one PA-API ``SearchResult.Items`` entry; None without an ASIN."""
    asin = item.get("ASIN")
    if not asin:
        return None

    listings = _display_value(item, "Offers", "Listings") or []
    price = None
    if listings and isinstance(listings[0], dict):
        price = _display_value(listings[0], "Price", "DisplayAmount")

    features = _display_value(item, "ItemInfo", "Features", "DisplayValues")
    return AmazonProduct(
        asin=asin,
        title=_display_value(item, "ItemInfo", "Title", "DisplayValue") or "",
        url=product_link(asin, associate_id),
        brand=_display_value(item, "ItemInfo", "ByLineInfo", "Brand", "DisplayValue"),
        price=price,
        image_url=_display_value(item, "Images", "Primary", "Medium", "URL"),
        star_rating=_display_value(item, "CustomerReviews", "StarRating", "Value"),
        review_count=_display_value(item, "CustomerReviews", "Count"),
        features=[str(f) for f in features] if isinstance(features, list) else [],
    )


def _is_no_results(payload: Any) -> bool:
    errors = payload.get("Errors") if isinstance(payload, dict) else None
    return bool(errors) and all(
        isinstance(e, dict) and e.get("Code") == "NoResults" for e in errors
    )


class AmazonProductClient(UpstreamClient):
    """Client for the PA-API 5 ``SearchItems`` operation."""

    provider_name = "Amazon Product Advertising"

    @property
    def api_key(self) -> Optional[str]:
        return self.settings.AMAZON_ACCESS_KEY_ID

    @property
    def is_configured(self) -> bool:
        return bool(
            self.settings.AMAZON_ACCESS_KEY_ID and self.settings.AMAZON_SECRET_ACCESS_KEY
        )

    @property
    def partner_tag(self) -> str:
        return self.settings.AMAZON_ASSOCIATE_ID

    def _signed_headers(self, url: str, body: bytes) -> Dict[str, str]:
        if not self.is_configured:
            logger.error(f"{self.provider_name} credentials not configured")
            raise ConfigurationError(f"{self.provider_name} credentials not configured")

        request = AWSRequest(
            method="POST",
            url=url,
            data=body,
            headers={
                "content-encoding": "amz-1.0",
                "content-type": "application/json; charset=utf-8",
                "host": self.settings.AMAZON_PAAPI_HOST,
                "x-amz-target": SEARCH_ITEMS_TARGET,
            },
        )
        credentials = Credentials(
            self.settings.AMAZON_ACCESS_KEY_ID, self.settings.AMAZON_SECRET_ACCESS_KEY
        )
        SigV4Auth(credentials, PAAPI_SERVICE, self.settings.AMAZON_PAAPI_REGION).add_auth(request)
        return dict(request.headers.items())

    async def search_items(
        self,
        keywords: str,
        search_index: str = "SportingGoods",
        item_count: int = MAX_ITEM_COUNT,
    ) -> List[AmazonProduct]:
        """
        Search Amazon's catalog.

        Args:
            keywords: Search keywords
            search_index: PA-API search index
            item_count: Number of items, at most 10

        Returns:
            Matching products with affiliate product links; empty when
            Amazon has no results
        """
        url = f"https://{self.settings.AMAZON_PAAPI_HOST}{SEARCH_ITEMS_PATH}"
        body = json.dumps({
            "Keywords": keywords,
            "Resources": SEARCH_RESOURCES,
            "SearchIndex": search_index,
            "ItemCount": min(item_count, MAX_ITEM_COUNT),
            "PartnerTag": self.partner_tag,
            "PartnerType": "Associates",
            "Marketplace": "www.amazon.com",
            "SortBy": "Relevance",
        }).encode("utf-8")
        headers = self._signed_headers(url, body)

        logger.info(f"Searching Amazon for: {keywords!r}")
        try:
            data = await self._make_request("POST", url, headers=headers, content=body)
        except UpstreamError as e:
            if _is_no_results(e.payload):
                return []
            raise

        if data.get("Errors"):
            if _is_no_results(data):
                return []
            raise UpstreamError(
                data["Errors"][0].get("Message") or "Amazon search failed",
                status_code=502,
                payload=data,
            )

        items = _display_value(data, "SearchResult", "Items") or []
        products = [p for p in (parse_item(i, self.partner_tag) for i in items) if p]
        logger.info(f"Amazon returned {len(products)} products")
        return products

    async def search_sport_equipment(
        self,
        sport: str,
        query: str,
        surface: Optional[str] = None,
        environment: Optional[str] = None,
    ) -> List[AmazonProduct]:
        """Search gear for a sport, narrowing by court surface and environment."""
        prefix = SPORT_KEYWORDS.get(sport.lower())
        parts = [prefix or sport, query, surface, environment]
        keywords = " ".join(
            part.strip() for part in parts if part and part.strip() and part != UNSPECIFIED
        )
        return await self.search_items(
            keywords,
            search_index="SportingGoods" if prefix else "All",
            item_count=8,
        )
