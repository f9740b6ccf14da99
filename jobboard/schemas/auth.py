"""
Authentication schemas.
"""
from pydantic import EmailStr, Field
from jobboard.schemas.base import BaseSchema, RequestSchema


class LoginRequest(RequestSchema):
    """Login request body."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class RegisterRequest(RequestSchema):
    """Registration request body. Self-registered users are never admins."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=8, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class TokenResponse(BaseSchema):
    """Token response after successful authentication."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class RefreshTokenRequest(RequestSchema):
    """Refresh token request body."""

    refresh_token: str


class TokenUser(BaseSchema):
    """Identity carried by a verified access token."""

    username: str
    is_admin: bool = False
