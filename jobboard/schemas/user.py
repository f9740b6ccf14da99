"""
User schemas.
"""
from typing import Optional
from pydantic import EmailStr, Field, field_validator

from jobboard.schemas.base import BaseSchema, RequestSchema, reject_null


class UserCreate(RequestSchema):
    """User creation schema (admin only; may create admins)."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=8, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    is_admin: bool = False


class UserUpdate(RequestSchema):
    """User update schema. Only admins may change ``isAdmin``."""

    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    password: Optional[str] = Field(None, min_length=8, max_length=72)
    email: Optional[EmailStr] = None
    is_admin: Optional[bool] = None

    @field_validator("first_name", "last_name", "password", "email", "is_admin")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class UserResponse(BaseSchema):
    """User response schema."""

    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False


class UserCreatedResponse(BaseSchema):
    """New user plus an access token for them."""

    user: UserResponse
    token: str
