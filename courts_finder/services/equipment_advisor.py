"""AI equipment recommendations for a court.

Claude is asked for product picks as JSON. Each pick is looked up on Amazon
when Product Advertising API credentials are set, and otherwise gets an
affiliate search link.
"""
import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from courts_finder.core.config import Settings
from courts_finder.core.errors import (
    AuthenticationError,
    ConfigurationError,
    InvalidRequestError,
    RateLimitError,
    ServiceError,
    UpstreamError,
)
from courts_finder.schemas.chat import (
    ChatMessage,
    ChatRequest,
    CourtContext,
    ProductRecommendation,
    PurchaseLinks,
    RecommendationResponse,
)
from courts_finder.services.amazon import (
    UNSPECIFIED,
    AmazonProduct,
    AmazonProductClient,
    affiliate_search_link,
    placeholder_image,
)
from courts_finder.services.anthropic_client import ClaudeClient

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 1000
MAX_HISTORY_MESSAGES = 5
DIRECT_SEARCH_RESULTS = 3

DEFAULT_MESSAGE = (
    "Here are my equipment recommendations based on your court and playing conditions:"
)
DEFAULT_TIPS = [
    "Check court regulations before bringing equipment",
    "Consider the surface type when choosing gear",
]

JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def validate_chat_request(body: Any) -> ChatRequest:
    """
    Validate a raw request body and fill in court context defaults.

    Args:
        body: Decoded JSON body

    Returns:
        Normalized chat request

    Raises:
        InvalidRequestError: With INVALID_MESSAGE, MESSAGE_TOO_LONG or
            INVALID_CONTEXT
    """
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object", "INVALID_JSON")

    message = body.get("userMessage")
    if not message or not isinstance(message, str):
        raise InvalidRequestError(
            "userMessage is required and must be a string", "INVALID_MESSAGE"
        )
    if len(message) > MAX_MESSAGE_LENGTH:
        raise InvalidRequestError(
            f"userMessage must be less than {MAX_MESSAGE_LENGTH} characters",
            "MESSAGE_TOO_LONG",
        )

    raw_context = body.get("courtContext")
    if not isinstance(raw_context, dict):
        raise InvalidRequestError(
            "courtContext is required and must be an object", "INVALID_CONTEXT"
        )

    # Falsy values fall back to the defaults
    context_fields = {
        key: value for key, value in raw_context.items()
        if value and key in ("courtType", "location", "surface", "environment", "sport", "priceRange")
        and isinstance(value, str)
    }
    amenities = raw_context.get("amenities")
    if isinstance(amenities, list):
        context_fields["amenities"] = [str(a) for a in amenities]

    history = []
    raw_history = body.get("conversationHistory")
    if isinstance(raw_history, list):
        for item in raw_history[-MAX_HISTORY_MESSAGES:]:
            if (
                isinstance(item, dict)
                and item.get("role") in ("user", "assistant")
                and isinstance(item.get("content"), str)
            ):
                history.append(ChatMessage(role=item["role"], content=item["content"]))

    return ChatRequest(
        user_message=message.strip(),
        court_context=CourtContext(**context_fields),
        conversation_history=history,
    )


def build_system_prompt(message: str, context: CourtContext) -> str:
    amenities = ", ".join(context.amenities) if context.amenities else "Not specified"
    surface = context.surface
    environment = context.environment
    sport = context.sport

    return f"""You are a sports equipment expert for CourtsFinders.com.

Current Context:
- Court Type: {context.court_type}
- Location: {context.location}
- Surface: {surface}
- Indoor/Outdoor: {environment}
- Sport: {sport}
- Available Amenities: {amenities}
- User Budget: {context.price_range}

User Question: {message}

Provide 3-5 specific product recommendations with:
- Exact brand and model names
- Price ranges ($50-100, $100-200, etc.)
- Why it's perfect for this court type and surface
- User rating (4.5/5 stars, etc.)
- Specific features that match the court environment
- What makes it suitable for {environment} {surface} courts

Additional guidelines:
- Consider the specific court surface ({surface}) when recommending equipment
- Factor in {environment} play conditions
- If budget range is specified, stay within those constraints
- Include sport-specific recommendations for {sport} if applicable

Format as clean JSON with this exact structure:
{{
  "message": "Your helpful response to the user",
  "recommendations": [
    {{
      "brand": "Brand Name",
      "model": "Specific Model Name",
      "priceRange": "$X-Y",
      "description": "Brief product description",
      "whyRecommended": "Why this is perfect for their specific court/situation",
      "userRating": "4.5/5 stars (1,234 reviews)",
      "features": ["Feature 1", "Feature 2", "Feature 3"],
      "suitableFor": ["court type", "player level", "conditions"],
      "category": "Equipment Category"
    }}
  ],
  "courtSpecificTips": [
    "Tip 1 for this specific court type",
    "Tip 2 for this surface",
    "Tip 3 for this environment"
  ]
}}

Make sure all recommendations are specifically tailored to {surface} {environment} courts and the sport of {sport}."""


def parse_reply(text: str) -> Dict[str, Any]:
    """Extract the first JSON object from Claude's reply.

    Replies without parseable JSON become a plain message with no picks.
    """
    match = JSON_OBJECT.search(text)
    if match:
        try:
            data = json.loads(match.group(0))
            if isinstance(data, dict):
                return data
        except ValueError:
            pass
    logger.warning("Failed to parse Claude JSON response, using raw text")
    return {
        "message": text,
        "recommendations": [],
        "courtSpecificTips": ["Unable to generate specific tips at this time."],
    }


def _string_list(value: Any) -> List[str]:
    if isinstance(value, list):
        return [str(item) for item in value]
    return []


def best_match(
    products: List[AmazonProduct], brand: str, model: str
) -> Optional[AmazonProduct]:
    """First product whose title names the brand or model, else the top hit."""
    for product in products:
        title = product.title.lower()
        if brand.lower() in title or model.lower() in title:
            return product
    return products[0] if products else None


class EquipmentAdvisor:
    """Turns a chat request into product recommendations."""

    def __init__(
        self,
        claude: ClaudeClient,
        settings: Settings,
        amazon: Optional[AmazonProductClient] = None,
    ):
        self.claude = claude
        self.amazon = amazon
        self.associate_id = settings.AMAZON_ASSOCIATE_ID

    async def recommend(self, request: ChatRequest) -> RecommendationResponse:
        """
        Ask Claude for recommendations and attach Amazon product data.

        Args:
            request: Validated chat request

        Returns:
            Recommendation response with at least one recommendation
        """
        context = request.court_context
        logger.info(f"Generating equipment recommendations for sport={context.sport}")

        messages = [
            {"role": m.role, "content": m.content} for m in request.conversation_history
        ]
        messages.append({"role": "user", "content": request.user_message})

        try:
            reply = await self.claude.create_message(
                system=build_system_prompt(request.user_message, context),
                messages=messages,
            )
        except ConfigurationError:
            raise
        except UpstreamError as e:
            logger.error(f"Claude request failed: {e.message}")
            if e.status_code == 429:
                raise RateLimitError("Rate limit exceeded for AI service")
            if e.status_code in (401, 403):
                raise AuthenticationError("AI service authentication failed")
            raise ServiceError(
                "Failed to generate equipment recommendations", "RECOMMENDATION_FAILED"
            )

        data = parse_reply(reply)
        recommendations = await self._build_recommendations(
            data.get("recommendations"), context
        )
        if not recommendations:
            recommendations = await self._direct_recommendations(request)
        if not recommendations:
            recommendations.append(self._fallback_recommendation(context))

        tips = data.get("courtSpecificTips")
        logger.info(f"Generated {len(recommendations)} equipment recommendations")
        return RecommendationResponse(
            message=data.get("message") or DEFAULT_MESSAGE,
            recommendations=recommendations,
            court_specific_tips=_string_list(tips) if isinstance(tips, list) else list(DEFAULT_TIPS),
            total_recommendations=len(recommendations),
            generated_at=datetime.now(timezone.utc).isoformat(),
        )

    async def _search_amazon(self, context: CourtContext, query: str) -> List[AmazonProduct]:
        """Amazon products for ``query``; empty when unconfigured or failing."""
        if self.amazon is None or not self.amazon.is_configured:
            return []

        sport = context.sport if context.sport != UNSPECIFIED else "sports"
        try:
            return await self.amazon.search_sport_equipment(
                sport, query, context.surface, context.environment
            )
        except ServiceError as e:
            logger.warning(f"Amazon search failed for {query!r}: {e.message}")
            return []

    async def _build_recommendations(
        self, raw: Any, context: CourtContext
    ) -> List[ProductRecommendation]:
        if not isinstance(raw, list):
            return []

        recommendations = []
        for item in raw:
            if not isinstance(item, dict) or not item.get("brand") or not item.get("model"):
                continue
            brand = str(item["brand"])
            model = str(item["model"])
            product = best_match(
                await self._search_amazon(context, f"{brand} {model}"), brand, model
            )

            suitable_for = _string_list(item.get("suitableFor")) or [
                f"{context.surface} courts",
                f"{context.environment} play",
            ]
            features = _string_list(item.get("features"))
            if not features and product:
                features = product.features

            recommendations.append(ProductRecommendation(
                brand=brand,
                model=model,
                price_range=(
                    (product and product.price)
                    or str(item.get("priceRange") or "Price not available")
                ),
                description=str(
                    item.get("description")
                    or (product and product.title)
                    or "No description available"
                ),
                why_recommended=str(item.get("whyRecommended") or "Recommended for your court type"),
                purchase_links=PurchaseLinks(
                    amazon=product.url if product else affiliate_search_link(
                        f"{brand} {model}", self.associate_id
                    ),
                ),
                user_rating=(
                    (product and product.rating_text)
                    or str(item.get("userRating") or "Rating not available")
                ),
                features=features,
                suitable_for=suitable_for,
                category=str(item.get("category") or "Sports Equipment"),
                image_url=(product and product.image_url) or placeholder_image(context.sport),
            ))
        return recommendations

    async def _direct_recommendations(
        self, request: ChatRequest
    ) -> List[ProductRecommendation]:
        """Top Amazon hits for the user's own question."""
        context = request.court_context
        products = await self._search_amazon(context, request.user_message)

        recommendations = []
        for product in products[:DIRECT_SEARCH_RESULTS]:
            words = product.title.split()
            recommendations.append(ProductRecommendation(
                brand=product.brand or (words[0] if words else "Various"),
                model=" ".join(words[1:3]) or "Recommended Product",
                price_range=product.price or "Price not available",
                description=product.title,
                why_recommended=(
                    f"Perfect for {context.sport} on {context.surface} "
                    f"{context.environment} courts"
                ),
                purchase_links=PurchaseLinks(amazon=product.url),
                user_rating=product.rating_text or "4.0/5 stars",
                features=product.features or ["High quality", "Durable construction"],
                suitable_for=[f"{context.surface} courts", f"{context.environment} play"],
                category="Sports Equipment",
                image_url=product.image_url or placeholder_image("sports"),
            ))
        return recommendations

    def _fallback_recommendation(self, context: CourtContext) -> ProductRecommendation:
        sport = context.sport if context.sport != UNSPECIFIED else "sports equipment"
        return ProductRecommendation(
            brand="Various",
            model="Recommended Equipment",
            price_range="$50-200",
            description="Quality sports equipment suitable for your court type",
            why_recommended=f"Perfect for {context.surface} {context.environment} courts",
            purchase_links=PurchaseLinks(
                amazon=affiliate_search_link(sport, self.associate_id),
            ),
            user_rating="4.0/5 stars",
            features=["Durable construction", "Good performance"],
            suitable_for=[f"{context.surface} courts", f"{context.environment} play"],
            category="Sports Equipment",
            image_url=placeholder_image("sports"),
        )
