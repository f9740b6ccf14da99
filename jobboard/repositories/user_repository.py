"""
User repository - data access for User entity.
"""
from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.exceptions import UserNotFoundException, UsernameAlreadyExistsException
from jobboard.repositories.base import BaseRepository, Row


class UserRepository(BaseRepository):
    def __init__(self):
        super().__init__(
            table="users",
            key_column="username",
            columns=("username", "first_name", "last_name", "email", "is_admin"),
            order_by="username",
            name_map={
                "firstName": "first_name",
                "lastName": "last_name",
                "isAdmin": "is_admin",
            },
        )

    def not_found(self, key: Any) -> UserNotFoundException:
        return UserNotFoundException(key)

    async def create(
        self,
        db: AsyncSession,
        data: Mapping[str, Any],
        *,
        password_hash: str,
    ) -> Row:
        """
        Create a user from API field names; the password is stored hashed.

        Raises:
            UsernameAlreadyExistsException: If the username is taken
        """
        if await self.exists(db, data["username"]):
            raise UsernameAlreadyExistsException(data["username"])

        return await self.insert(db, {
            "username": data["username"],
            "password": password_hash,
            "first_name": data["firstName"],
            "last_name": data["lastName"],
            "email": data["email"],
            "is_admin": bool(data.get("isAdmin", False)),
        })

    async def get_with_password(
        self,
        db: AsyncSession,
        username: str,
    ) -> Optional[Row]:
        """Find a user including the password hash (for login only)."""
        rows = await self._execute(
            db,
            f"SELECT {self.select_list}, password FROM users WHERE username = $1",
            [username],
        )
        return rows[0] if rows else None
