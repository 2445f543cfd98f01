"""Mock authentication endpoints."""
import logging

from fastapi import APIRouter, HTTPException

from courts_finder.core.errors import ServiceError, to_http_exception
from courts_finder.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from courts_finder.services.auth_service import (
    DEMO_EMAIL,
    DEMO_PASSWORD,
    MIN_PASSWORD_LENGTH,
    auth_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
async def login(credentials: LoginRequest):
    """
    Log in with the demo account.

    Args:
        credentials: email and password

    Returns:
        User and mock token
    """
    try:
        return auth_service.login(credentials)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Login error")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.get("/login")
async def login_info():
    """Describe the login endpoint."""
    return {
        "endpoint": "/auth/login",
        "method": "POST",
        "description": "User authentication endpoint",
        "requiredFields": ["email", "password"],
        "demoCredentials": {"email": DEMO_EMAIL, "password": DEMO_PASSWORD},
    }


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(registration: RegisterRequest):
    """
    Register a user (mock, nothing is stored).

    Args:
        registration: name, email and password

    Returns:
        New user and mock token
    """
    try:
        return auth_service.register(registration)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Registration error")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.get("/register")
async def register_info():
    """Describe the registration endpoint."""
    return {
        "endpoint": "/auth/register",
        "method": "POST",
        "description": "User registration endpoint",
        "requiredFields": ["name", "email", "password"],
        "validation": {
            "email": "Must be valid email format",
            "password": f"Minimum {MIN_PASSWORD_LENGTH} characters",
            "name": "Required field",
        },
    }
