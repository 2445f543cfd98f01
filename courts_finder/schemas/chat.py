"""Equipment recommendation chat schemas."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CourtContext(CamelModel):
    """Court the user is asking about, with the defaults used in prompts."""

    court_type: str = "General sports court"
    location: str = "Not specified"
    surface: str = "Not specified"
    environment: str = "outdoor"  # indoor or outdoor
    sport: str = "Not specified"
    amenities: List[str] = Field(default_factory=list)
    price_range: str = "Not specified"


class ChatMessage(BaseModel):
    role: str  # user or assistant
    content: str


class ChatRequest(CamelModel):
    """Validated recommendation request."""

    user_message: str
    court_context: CourtContext
    conversation_history: List[ChatMessage] = Field(default_factory=list)


class PurchaseLinks(BaseModel):
    amazon: Optional[str] = None
    retailer: Optional[str] = ""
    direct: Optional[str] = ""


class ProductRecommendation(CamelModel):
    """Schema for a single product recommendation."""

    brand: str
    model: str
    price_range: str
    description: str
    why_recommended: str
    purchase_links: PurchaseLinks
    user_rating: str
    features: List[str] = Field(default_factory=list)
    suitable_for: List[str] = Field(default_factory=list)
    category: str = "Sports Equipment"
    image_url: Optional[str] = None


class RecommendationResponse(CamelModel):
    """Schema for the recommendation response."""

    message: str
    recommendations: List[ProductRecommendation]
    court_specific_tips: List[str]
    total_recommendations: int
    generated_at: str
    success: bool = True
