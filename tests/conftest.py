"""
Pytest configuration and shared fixtures.

No database is needed: ``fetch_rows`` is replaced by an AsyncMock so tests
can both feed rows back and inspect the exact SQL text and bind values
that reached the driver.
"""
import os

# Must be set before jobboard.core.config builds its settings
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

from typing import Optional
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from jobboard.core.database import get_db
from jobboard.core.security import create_access_token
from jobboard.main import app


class FakeSession:
    """Stand-in for AsyncSession; repositories only pass it through."""


@pytest.fixture
def db() -> FakeSession:
    return FakeSession()


@pytest.fixture
def fetch_rows(monkeypatch) -> AsyncMock:
    """Replace statement execution; set ``return_value`` or ``side_effect`` per test."""
    mock = AsyncMock(return_value=[])
    monkeypatch.setattr("jobboard.repositories.base.fetch_rows", mock)
    return mock


@pytest.fixture
def client(db):
    """Test client for API endpoints, with the session dependency stubbed."""

    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers() -> dict:
    token = create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def company_row() -> dict:
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    }


@pytest.fixture
def job_row() -> dict:
    return {
        "id": 1,
        "title": "j1",
        "salary": 100000,
        "equity": None,
        "company_handle": "c1",
    }


@pytest.fixture
def user_row() -> dict:
    return {
        "username": "u1",
        "first_name": "U1F",
        "last_name": "U1L",
        "email": "user1@user.com",
        "is_admin": False,
    }


def _statement(mock: AsyncMock, index: int = -1):
    call = mock.await_args_list[index]
    _db, sql, values = call.args
    return sql, list(values)


@pytest.fixture
def statement():
    """``statement(mock, index)`` returns ``(sql, values)`` of one recorded fetch_rows call."""
    return _statement


def _integrity_error(sqlstate: str = "23505", constraint: Optional[str] = None) -> IntegrityError:
    """IntegrityError shaped like SQLAlchemy's wrapping of an asyncpg error."""
    cause = Exception("duplicate key value violates unique constraint")
    cause.constraint_name = constraint
    orig = Exception(str(cause))
    orig.sqlstate = sqlstate
    orig.__cause__ = cause
    return IntegrityError("INSERT", (), orig)


@pytest.fixture
def integrity_error():
    """``integrity_error(sqlstate, constraint)`` builds a driver integrity error."""
    return _integrity_error
