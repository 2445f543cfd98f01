"""Booking schemas."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class BookingRequest(BaseModel):
    """Schema for a booking request.

    Every field is optional here so that missing values produce the
    booking service's own 400 instead of a validation error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    user_id: Optional[str] = None


class Booking(BaseModel):
    """Schema for a confirmed (mock) booking."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    court_id: str
    user_id: str
    date: str
    start_time: str
    end_time: str
    status: str
    total_price: int
    created_at: str


class BookingResponse(BaseModel):
    success: bool = True
    booking: Booking
    message: str = "Court booked successfully!"
