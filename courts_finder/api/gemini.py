"""Gemini content generation endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from courts_finder.api.deps import get_gemini_client
from courts_finder.core.errors import (
    InvalidRequestError,
    ServiceError,
    to_http_exception,
)
from courts_finder.schemas.gemini import GeminiRequest, GeminiResponse
from courts_finder.services.gemini import GeminiClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gemini", tags=["gemini"])


@router.get("")
async def gemini_info(client: GeminiClient = Depends(get_gemini_client)):
    """Describe the endpoint and whether Gemini is configured."""
    return {
        "message": "Gemini AI API endpoint",
        "configured": client.is_configured,
        "endpoints": {
            "POST": {
                "recommendations": "Generate court recommendations",
                "general": "Generate general content",
            }
        },
    }


@router.post("", response_model=GeminiResponse)
async def generate(
    body: GeminiRequest,
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Generate content with Gemini.

    ``type=recommendations`` needs location and sport; ``type=general``
    needs prompt.

    Returns:
        Generated text
    """
    try:
        if body.type == "recommendations":
            if not body.location or not body.sport:
                raise InvalidRequestError(
                    "Location and sport are required for recommendations"
                )
            content = await client.generate_court_recommendations(
                body.location, body.sport, body.preferences
            )
        elif body.type == "general":
            if not body.prompt:
                raise InvalidRequestError(
                    "Prompt is required for general content generation"
                )
            content = await client.generate_content(body.prompt)
        else:
            raise InvalidRequestError(
                'Invalid request type. Use "recommendations" or "general"'
            )
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Gemini API route error")
        raise HTTPException(
            status_code=500, detail=f"Failed to generate content: {str(e)}"
        )

    return GeminiResponse(content=content)
