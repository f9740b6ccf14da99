"""
Tests for password hashing, tokens and the auth dependencies.
"""
from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from jobboard.api.deps import get_admin_or_self, get_admin_user, get_current_user
from jobboard.core.exceptions import (
    ForbiddenException,
    InvalidTokenException,
    UnauthorizedException,
)
from jobboard.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
    verify_token_type,
)
from jobboard.schemas.auth import TokenUser


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("password1")

        assert hashed != "password1"
        assert verify_password("password1", hashed)
        assert not verify_password("wrong", hashed)


class TestTokens:
    def test_access_token_payload(self):
        payload = decode_token(create_access_token("u1", is_admin=True))

        assert payload["sub"] == "u1"
        assert payload["is_admin"] is True
        assert verify_token_type(payload, "access")
        assert not verify_token_type(payload, "refresh")

    def test_access_token_defaults_to_non_admin(self):
        assert decode_token(create_access_token("u1"))["is_admin"] is False

    def test_refresh_token_payload(self):
        payload = decode_token(create_refresh_token("u1"))

        assert payload["sub"] == "u1"
        assert verify_token_type(payload, "refresh")
        assert "is_admin" not in payload

    def test_expired_token(self):
        token = create_access_token("u1", expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_garbage_token(self):
        assert decode_token("not.a.token") is None


class TestCurrentUser:
    @pytest.mark.asyncio
    async def test_valid_token(self):
        user = await get_current_user(bearer(create_access_token("u1", is_admin=True)))

        assert user == TokenUser(username="u1", is_admin=True)

    @pytest.mark.asyncio
    async def test_no_credentials(self):
        with pytest.raises(UnauthorizedException) as exc_info:
            await get_current_user(None)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_refresh_token_rejected(self):
        with pytest.raises(InvalidTokenException):
            await get_current_user(bearer(create_refresh_token("u1")))

    @pytest.mark.asyncio
    async def test_bad_token(self):
        with pytest.raises(InvalidTokenException):
            await get_current_user(bearer("bad"))


class TestGuards:
    @pytest.mark.asyncio
    async def test_admin_passes(self):
        admin = TokenUser(username="admin", is_admin=True)

        assert await get_admin_user(admin) is admin

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(self):
        with pytest.raises(ForbiddenException):
            await get_admin_user(TokenUser(username="u1"))

    @pytest.mark.asyncio
    async def test_admin_or_self(self):
        admin = TokenUser(username="admin", is_admin=True)
        user = TokenUser(username="u1")

        assert await get_admin_or_self("u1", admin) is admin
        assert await get_admin_or_self("u1", user) is user

    @pytest.mark.asyncio
    async def test_other_user_forbidden(self):
        with pytest.raises(ForbiddenException):
            await get_admin_or_self("u2", TokenUser(username="u1"))
