"""Authentication schemas."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class User(BaseModel):
    """Schema for a (mock) user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    email: str
    name: str
    role: str = "user"
    created_at: Optional[str] = None


class AuthResponse(BaseModel):
    """Schema returned by login and registration."""

    success: bool = True
    user: User
    token: str
    message: str
