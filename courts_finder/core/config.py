"""Application configuration."""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    DEBUG: bool = True

    # Google Places / Geocoding / Directions
    GOOGLE_PLACES_API_KEY: Optional[str] = None
    GOOGLE_MAPS_BASE_URL: str = "https://maps.googleapis.com/maps/api"

    # Foursquare
    FOURSQUARE_API_KEY: Optional[str] = None
    FOURSQUARE_BASE_URL: str = "https://api.foursquare.com/v3"

    # Gemini
    GOOGLE_GEMINI_API_KEY: Optional[str] = None
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-1.5-flash-latest"

    # Anthropic
    ANTHROPIC_API_KEY: Optional[str] = None
    ANTHROPIC_BASE_URL: str = "https://api.anthropic.com"
    ANTHROPIC_VERSION: str = "2023-06-01"
    CLAUDE_MODEL: str = "claude-3-5-sonnet-20241022"

    # Amazon affiliate and Product Advertising API
    AMAZON_ASSOCIATE_ID: str = "courtsfinder-20"
    AMAZON_ACCESS_KEY_ID: Optional[str] = None
    AMAZON_SECRET_ACCESS_KEY: Optional[str] = None
    AMAZON_PAAPI_HOST: str = "webservices.amazon.com"
    AMAZON_PAAPI_REGION: str = "us-east-1"

    # Outbound requests
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    # Chat
    CHAT_RATE_LIMIT_PER_MINUTE: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the process-wide settings."""
    return settings
