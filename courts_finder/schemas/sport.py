"""Sport schemas."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Sport(BaseModel):
    """Schema for a supported sport."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    name: str
    description: str
    icon: str
    popularity_score: float
