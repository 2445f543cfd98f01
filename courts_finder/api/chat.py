"""Equipment recommendation chat endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from courts_finder.api.deps import get_equipment_advisor
from courts_finder.core.errors import (
    InvalidRequestError,
    ServiceError,
    to_http_exception,
)
from courts_finder.schemas.chat import RecommendationResponse
from courts_finder.services.equipment_advisor import (
    MAX_HISTORY_MESSAGES,
    MAX_MESSAGE_LENGTH,
    EquipmentAdvisor,
    validate_chat_request,
)
from courts_finder.services.rate_limiter import (
    FixedWindowRateLimiter,
    get_chat_rate_limiter,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def client_address(request: Request) -> str:
    """Best-effort client address for rate limiting."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    if request.client:
        return request.client.host
    return "anonymous"


@router.post("/recommendations", response_model=RecommendationResponse)
async def recommend_equipment(
    request: Request,
    advisor: EquipmentAdvisor = Depends(get_equipment_advisor),
    limiter: FixedWindowRateLimiter = Depends(get_chat_rate_limiter),
):
    """
    Recommend equipment for a court using Claude.

    Body: ``userMessage`` (required, max 1000 chars), ``courtContext``
    (required object) and optional ``conversationHistory``.

    Returns:
        Recommendations with affiliate purchase links and court tips
    """
    try:
        limiter.hit(client_address(request))

        try:
            body = await request.json()
        except ValueError:
            raise InvalidRequestError("Invalid JSON in request body", "INVALID_JSON")

        chat_request = validate_chat_request(body)
        return await advisor.recommend(chat_request)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Equipment recommendation error")
        raise HTTPException(
            status_code=500,
            detail={"error": "INTERNAL_SERVER_ERROR", "message": str(e)},
        )


@router.get("/recommendations")
async def recommendations_info(
    limiter: FixedWindowRateLimiter = Depends(get_chat_rate_limiter),
):
    """Describe the recommendation endpoint."""
    return {
        "endpoint": "/chat/recommendations",
        "method": "POST",
        "description": "Get AI-powered sports equipment recommendations based on court context",
        "rateLimit": f"{limiter.limit} requests per minute per IP",
        "requestBody": {
            "userMessage": f"string (required, max {MAX_MESSAGE_LENGTH} chars)",
            "courtContext": {
                "courtType": "string (optional)",
                "location": "string (optional)",
                "surface": "string (optional)",
                "environment": "indoor | outdoor (optional)",
                "sport": "string (optional)",
                "amenities": "string[] (optional)",
                "priceRange": "string (optional)",
            },
            "conversationHistory": f"array (optional, max {MAX_HISTORY_MESSAGES} messages)",
        },
        "example": {
            "userMessage": "What tennis racquet should I get for clay courts?",
            "courtContext": {
                "courtType": "Tennis court",
                "surface": "clay",
                "environment": "outdoor",
                "sport": "tennis",
                "priceRange": "$100-300",
            },
        },
    }
