"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.database import get_db
from jobboard.core.rate_limit import limiter, RATE_AUTH
from jobboard.services.auth_service import AuthService
from jobboard.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    RefreshTokenRequest,
)

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/token", response_model=TokenResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Login with username and password.

    Returns access and refresh tokens on successful login.
    """
    return await auth_service.login(db, username=body.username, password=body.password)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user.

    Returns access and refresh tokens on successful registration.
    """
    return await auth_service.register(db, body)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    body: RefreshTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """Refresh access token using refresh token."""
    return await auth_service.refresh(db, refresh_token=body.refresh_token)
