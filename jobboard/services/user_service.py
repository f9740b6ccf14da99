"""
User service - business logic for user accounts.

Owns password hashing: plain-text passwords never reach a repository.
"""
from typing import Any, Dict, List, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.exceptions import InvalidCredentialsException
from jobboard.core.logging import get_logger
from jobboard.core.security import hash_password, verify_password
from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.user import UserResponse

logger = get_logger(__name__)


class UserService:
    """Handles user account operations."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def register(
        self,
        db: AsyncSession,
        data: Mapping[str, Any],
    ) -> UserResponse:
        """
        Create a user from API field names.

        Raises:
            UsernameAlreadyExistsException: If the username is taken
        """
        row = await self.user_repo.create(
            db,
            data,
            password_hash=hash_password(data["password"]),
        )
        logger.info("user_registered", username=row["username"], is_admin=row["is_admin"])
        return UserResponse.model_validate(row)

    async def authenticate(
        self,
        db: AsyncSession,
        username: str,
        password: str,
    ) -> UserResponse:
        """
        Check a username/password pair.

        Raises:
            InvalidCredentialsException: If the user is unknown or the password is wrong
        """
        row = await self.user_repo.get_with_password(db, username)
        if not row or not verify_password(password, row["password"]):
            logger.info("login_failed", username=username)
            raise InvalidCredentialsException()
        return UserResponse.model_validate(row)

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        rows = await self.user_repo.find_all(db)
        return [UserResponse.model_validate(row) for row in rows]

    async def get_user(self, db: AsyncSession, username: str) -> UserResponse:
        return UserResponse.model_validate(await self.user_repo.get(db, username))

    async def update_user(
        self,
        db: AsyncSession,
        username: str,
        fields: Mapping[str, Any],
    ) -> UserResponse:
        """Partially update a user, hashing a new password first."""
        updates: Dict[str, Any] = dict(fields)
        if updates.get("password") is not None:
            updates["password"] = hash_password(updates["password"])

        row = await self.user_repo.update(db, username, updates)
        logger.info("user_updated", username=username, fields=sorted(fields))
        return UserResponse.model_validate(row)

    async def remove_user(self, db: AsyncSession, username: str) -> None:
        await self.user_repo.remove(db, username)
        logger.info("user_deleted", username=username)
