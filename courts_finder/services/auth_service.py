"""Mock authentication service.

Accepts a single hardcoded demo account and issues placeholder tokens.
There is no credential storage and no session state.
"""
import logging
import re
import time
from datetime import datetime, timezone

from courts_finder.core.errors import AuthenticationError, InvalidRequestError
from courts_finder.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    User,
)

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@courtsfinders.com"
DEMO_PASSWORD = "demo123"
DEMO_TOKEN = "mock-jwt-token-12345"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


class AuthService:
    """Canned login and registration."""

    def login(self, request: LoginRequest) -> AuthResponse:
        if not request.email or not request.password:
            raise InvalidRequestError("Email and password are required")

        if request.email != DEMO_EMAIL or request.password != DEMO_PASSWORD:
            logger.info("Rejected login attempt")
            raise AuthenticationError("Invalid credentials")

        user = User(id="1", email=DEMO_EMAIL, name="Demo User", role="user")
        return AuthResponse(user=user, token=DEMO_TOKEN, message="Login successful")

    def register(self, request: RegisterRequest) -> AuthResponse:
        if not request.email or not request.password or not request.name:
            raise InvalidRequestError("Name, email and password are required")

        if not EMAIL_PATTERN.match(request.email):
            raise InvalidRequestError("Invalid email format")

        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise InvalidRequestError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        timestamp = str(int(time.time() * 1000))
        user = User(
            id=timestamp,
            email=request.email,
            name=request.name,
            role="user",
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        return AuthResponse(
            user=user,
            token=f"mock-jwt-token-{timestamp}",
            message="Registration successful",
        )


# Singleton instance
auth_service = AuthService()
