"""Mock booking service. Nothing is persisted."""
import logging
import math
import time
from datetime import datetime, timezone
from typing import Dict

from courts_finder.core.errors import InvalidRequestError
from courts_finder.schemas.booking import Booking, BookingRequest

logger = logging.getLogger(__name__)

# Hourly rates keyed by court id
HOURLY_RATES: Dict[str, int] = {
    "1": 25,  # Downtown Tennis Center
    "2": 15,  # Community Basketball Court
    "3": 35,  # Hickory Sports Complex
    "4": 20,  # Lenoir-Rhyne Tennis Courts
    "5": 12,  # Riverwalk Basketball Courts
    "6": 28,  # Northeast Recreation Center
}
DEFAULT_HOURLY_RATE = 20

TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def _parse_time(value: str) -> datetime:
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise InvalidRequestError(f"Invalid time format: {value!r} (expected HH:MM)")


def calculate_price(court_id: str, start_time: str, end_time: str) -> int:
    """
    Price a booking from the court's hourly rate and its duration.

    Both times are taken to fall on the same day.

    Args:
        court_id: Court ID as it appears in the URL
        start_time: Start time, HH:MM
        end_time: End time, HH:MM

    Returns:
        Hourly rate times duration in hours, rounded half up
    """
    hourly_rate = HOURLY_RATES.get(court_id, DEFAULT_HOURLY_RATE)
    start = _parse_time(start_time)
    end = _parse_time(end_time)

    if end <= start:
        raise InvalidRequestError("endTime must be after startTime")

    duration_hours = (end - start).total_seconds() / 3600
    return math.floor(hourly_rate * duration_hours + 0.5)


class BookingService:
    """Creates confirmed bookings without storing them."""

    def create_booking(self, court_id: str, request: BookingRequest) -> Booking:
        if not request.date or not request.start_time or not request.end_time:
            raise InvalidRequestError("Missing required booking information")

        booking = Booking(
            id=f"booking_{int(time.time() * 1000)}",
            court_id=court_id,
            user_id=request.user_id or "guest_user",
            date=request.date,
            start_time=request.start_time,
            end_time=request.end_time,
            status="confirmed",
            total_price=calculate_price(court_id, request.start_time, request.end_time),
            created_at=datetime.now(timezone.utc).isoformat(),
        )

        logger.info(f"Booking created: {booking.id} for court {court_id}")
        return booking


# Singleton instance
booking_service = BookingService()
