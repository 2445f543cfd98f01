"""FastAPI dependencies shared by the routers."""
from fastapi import Depends

from courts_finder.core.config import Settings, get_settings
from courts_finder.services.amazon import AmazonProductClient
from courts_finder.services.anthropic_client import ClaudeClient
from courts_finder.services.court_finder import CourtFinder
from courts_finder.services.court_repository import CourtRepository, get_court_repository
from courts_finder.services.court_search import CourtSearchEngine
from courts_finder.services.equipment_advisor import EquipmentAdvisor
from courts_finder.services.foursquare import FoursquareClient
from courts_finder.services.gemini import GeminiClient
from courts_finder.services.google_places import GooglePlacesClient


def get_search_engine(
    repository: CourtRepository = Depends(get_court_repository),
) -> CourtSearchEngine:
    return CourtSearchEngine(repository)


def get_google_places_client(
    settings: Settings = Depends(get_settings),
) -> GooglePlacesClient:
    return GooglePlacesClient(settings)


def get_foursquare_client(
    settings: Settings = Depends(get_settings),
) -> FoursquareClient:
    return FoursquareClient(settings)


def get_gemini_client(settings: Settings = Depends(get_settings)) -> GeminiClient:
    return GeminiClient(settings)


def get_claude_client(settings: Settings = Depends(get_settings)) -> ClaudeClient:
    return ClaudeClient(settings)


def get_amazon_client(
    settings: Settings = Depends(get_settings),
) -> AmazonProductClient:
    return AmazonProductClient(settings)


def get_equipment_advisor(
    claude: ClaudeClient = Depends(get_claude_client),
    amazon: AmazonProductClient = Depends(get_amazon_client),
    settings: Settings = Depends(get_settings),
) -> EquipmentAdvisor:
    return EquipmentAdvisor(claude, settings, amazon)


def get_court_finder(
    engine: CourtSearchEngine = Depends(get_search_engine),
    places: GooglePlacesClient = Depends(get_google_places_client),
    foursquare: FoursquareClient = Depends(get_foursquare_client),
) -> CourtFinder:
    return CourtFinder(engine, places, foursquare)
