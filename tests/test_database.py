"""
Tests for statement execution and the request session lifecycle.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from jobboard.core.database import fetch_rows, get_db


class FakeResult:
    def __init__(self, rows, returns_rows=True):
        self._rows = rows
        self.returns_rows = returns_rows

    def mappings(self):
        return list(self._rows)


class FakeSessionContext:
    def __init__(self, session):
        self.session = session

    async def __aenter__(self):
        return self.session

    async def __aexit__(self, *exc_info):
        return False


def session_with(result: FakeResult):
    connection = MagicMock()
    connection.exec_driver_sql = AsyncMock(return_value=result)
    session = MagicMock()
    session.connection = AsyncMock(return_value=connection)
    return session, connection


class TestFetchRows:
    @pytest.mark.asyncio
    async def test_runs_on_session_connection(self):
        session, connection = session_with(FakeResult([{"handle": "c1", "name": "C1"}]))

        rows = await fetch_rows(session, "SELECT handle, name FROM companies WHERE handle = $1", ["c1"])

        assert rows == [{"handle": "c1", "name": "C1"}]
        session.connection.assert_awaited_once()
        connection.exec_driver_sql.assert_awaited_once_with(
            "SELECT handle, name FROM companies WHERE handle = $1",
            ("c1",),
        )
        connection.get_raw_connection.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_values(self):
        session, connection = session_with(FakeResult([]))

        assert await fetch_rows(session, "SELECT id FROM jobs ORDER BY id") == []
        connection.exec_driver_sql.assert_awaited_once_with("SELECT id FROM jobs ORDER BY id", ())

    @pytest.mark.asyncio
    async def test_statement_without_rows(self):
        session, _connection = session_with(FakeResult([], returns_rows=False))

        assert await fetch_rows(session, "DELETE FROM jobs WHERE id = $1", [1]) == []


class TestGetDb:
    @pytest.mark.asyncio
    async def test_commits_on_success(self, monkeypatch):
        session = AsyncMock()
        monkeypatch.setattr("jobboard.core.database.async_session_maker", lambda: FakeSessionContext(session))

        gen = get_db()
        assert await gen.__anext__() is session
        with pytest.raises(StopAsyncIteration):
            await gen.__anext__()

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, monkeypatch):
        session = AsyncMock()
        monkeypatch.setattr("jobboard.core.database.async_session_maker", lambda: FakeSessionContext(session))

        gen = get_db()
        await gen.__anext__()
        with pytest.raises(RuntimeError):
            await gen.athrow(RuntimeError("statement failed"))

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
