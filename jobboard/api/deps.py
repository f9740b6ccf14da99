"""
API dependencies for dependency injection.

Identity comes from the access token alone; route guards never hit the
database.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobboard.core.security import decode_token, verify_token_type
from jobboard.core.exceptions import (
    UnauthorizedException,
    InvalidTokenException,
    ForbiddenException,
)
from jobboard.schemas.auth import TokenUser


# Security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenUser:
    """
    Get the current authenticated user.

    Raises:
        UnauthorizedException: If no token provided
        InvalidTokenException: If token is invalid or expired
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    payload = decode_token(credentials.credentials)

    if not payload:
        raise InvalidTokenException()

    if not verify_token_type(payload, "access"):
        raise InvalidTokenException()

    username = payload.get("sub")
    if not username:
        raise InvalidTokenException()

    return TokenUser(username=username, is_admin=bool(payload.get("is_admin", False)))


async def get_admin_user(
    current_user: TokenUser = Depends(get_current_user),
) -> TokenUser:
    """
    Get current user, ensuring they are an admin.

    Raises:
        ForbiddenException: If user is not an admin
    """
    if not current_user.is_admin:
        raise ForbiddenException("Admin access required")
    return current_user


async def get_admin_or_self(
    username: str,
    current_user: TokenUser = Depends(get_current_user),
) -> TokenUser:
    """
    Allow admins, or the user named by the ``{username}`` path parameter.

    Raises:
        ForbiddenException: If the caller is neither
    """
    if not (current_user.is_admin or current_user.username == username):
        raise ForbiddenException("Admin or same user required")
    return current_user
