"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courts_finder.api import (
    auth,
    chat,
    courts,
    foursquare,
    gemini,
    places,
    placeholder,
    search,
    sports,
)
from courts_finder.core.config import Settings, get_settings, settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _provider_status(config: Settings) -> dict:
    return {
        "google_places": bool(config.GOOGLE_PLACES_API_KEY),
        "foursquare": bool(config.FOURSQUARE_API_KEY),
        "gemini": bool(config.GOOGLE_GEMINI_API_KEY),
        "anthropic": bool(config.ANTHROPIC_API_KEY),
        "amazon": bool(config.AMAZON_ACCESS_KEY_ID and config.AMAZON_SECRET_ACCESS_KEY),
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Courts Finder API")
    logger.info(f"Debug mode: {settings.DEBUG}")
    for provider, configured in _provider_status(settings).items():
        if not configured:
            logger.warning(f"{provider} credentials not configured")

    yield

    logger.info("Shutting down Courts Finder API")


# Create FastAPI app
app = FastAPI(
    title="Courts Finder",
    description="Find sports courts, book them and get equipment recommendations",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(courts.router)
app.include_router(search.router)
app.include_router(sports.router)
app.include_router(auth.router)
app.include_router(places.router)
app.include_router(foursquare.router)
app.include_router(gemini.router)
app.include_router(chat.router)
app.include_router(placeholder.router)


@app.get("/health")
async def health(config: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "providers": _provider_status(config),
    }
