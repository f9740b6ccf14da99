"""
User routes.

Thin controllers - all business logic lives in UserService.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.database import get_db
from jobboard.core.exceptions import ForbiddenException
from jobboard.core.security import create_access_token
from jobboard.api.deps import get_admin_user, get_admin_or_self
from jobboard.services.user_service import UserService
from jobboard.schemas.auth import TokenUser
from jobboard.schemas.base import DeletedResponse
from jobboard.schemas.user import UserCreate, UserCreatedResponse, UserResponse, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()


@router.post("/", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Add a user (admin only; the new user may be an admin).

    This is not the registration endpoint. Returns the user plus an access
    token for them.
    """
    user = await user_service.register(db, data.to_fields())
    token = create_access_token(user.username, is_admin=user.is_admin)
    return UserCreatedResponse(user=user, token=token)


@router.get("/", response_model=List[UserResponse])
async def list_users(
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """List all users."""
    return await user_service.list_users(db)


@router.get("/{username}", response_model=UserResponse)
async def get_user(
    username: str,
    current_user: TokenUser = Depends(get_admin_or_self),
    db: AsyncSession = Depends(get_db),
):
    """Get a user."""
    return await user_service.get_user(db, username)


@router.patch("/{username}", response_model=UserResponse)
async def update_user(
    username: str,
    data: UserUpdate,
    current_user: TokenUser = Depends(get_admin_or_self),
    db: AsyncSession = Depends(get_db),
):
    """Update a user; only admins may grant or revoke admin."""
    fields = data.to_fields()
    if "isAdmin" in fields and not current_user.is_admin:
        raise ForbiddenException("Only admins can change admin status")
    return await user_service.update_user(db, username, fields)


@router.delete("/{username}", response_model=DeletedResponse)
async def delete_user(
    username: str,
    current_user: TokenUser = Depends(get_admin_or_self),
    db: AsyncSession = Depends(get_db),
):
    """Delete a user."""
    await user_service.remove_user(db, username)
    return DeletedResponse(deleted=username)
