"""
Authentication service - handles registration, login, and token management.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.config import settings
from jobboard.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_token_type,
)
from jobboard.core.exceptions import InvalidTokenException, UserNotFoundException
from jobboard.schemas.auth import RegisterRequest, TokenResponse
from jobboard.schemas.user import UserResponse
from jobboard.services.user_service import UserService


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_service = UserService()

    async def register(
        self,
        db: AsyncSession,
        request: RegisterRequest,
    ) -> TokenResponse:
        """
        Register a new (non-admin) user and return tokens.

        Raises:
            UsernameAlreadyExistsException: If the username is taken.
        """
        user = await self.user_service.register(db, request.to_fields())
        return self._generate_tokens(user)

    async def login(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
    ) -> TokenResponse:
        """
        Authenticate user and return tokens.

        Raises:
            InvalidCredentialsException: If username/password is wrong.
        """
        user = await self.user_service.authenticate(db, username, password)
        return self._generate_tokens(user)

    async def refresh(
        self,
        db: AsyncSession,
        *,
        refresh_token: str,
    ) -> TokenResponse:
        """
        Issue new tokens using a valid refresh token.

        The user is re-read so a role change takes effect on refresh.

        Raises:
            InvalidTokenException: If refresh token is invalid, expired, or its user is gone.
        """
        payload = decode_token(refresh_token)

        if not payload or not verify_token_type(payload, "refresh"):
            raise InvalidTokenException()

        username = payload.get("sub")
        if not username:
            raise InvalidTokenException()

        try:
            user = await self.user_service.get_user(db, username)
        except UserNotFoundException:
            raise InvalidTokenException()

        return self._generate_tokens(user)

    def _generate_tokens(self, user: UserResponse) -> TokenResponse:
        """Generate access and refresh tokens for a user."""
        return TokenResponse(
            access_token=create_access_token(user.username, is_admin=user.is_admin),
            refresh_token=create_refresh_token(user.username),
            expires_in=settings.access_token_expire_minutes * 60,
        )
