"""Gemini content generation schemas."""
from pydantic import BaseModel
from typing import Optional


class GeminiRequest(BaseModel):
    """Schema for a content generation request."""

    type: Optional[str] = None  # recommendations or general
    prompt: Optional[str] = None
    location: Optional[str] = None
    sport: Optional[str] = None
    preferences: Optional[str] = None


class GeminiResponse(BaseModel):
    content: str
    success: bool = True
