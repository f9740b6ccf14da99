"""
Database engine, session management and raw statement execution.

Repositories build ``$1``-style parameterized SQL themselves, so statements
are run on the asyncpg connection that backs the SQLAlchemy session.
"""
from typing import Any, AsyncGenerator, Dict, List, Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from jobboard.core.config import settings
from jobboard.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get a database session.

    Commits on success, rolls back if the request raised.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def fetch_rows(
    db: AsyncSession,
    sql: str,
    values: Sequence[Any] = (),
) -> List[Dict[str, Any]]:
    """
    Execute a ``$n``-parameterized statement and return its rows as dicts.

    The statement runs on the session's connection through SQLAlchemy's
    driver-level execution, so it joins the session transaction that
    ``get_db`` commits or rolls back. The asyncpg dialect uses the
    ``numeric_dollar`` paramstyle, so the text reaches asyncpg unchanged.

    Args:
        db: Session whose connection runs the statement
        sql: Statement text using asyncpg positional placeholders
        values: Bind values, ``values[i]`` fills ``$i+1``

    Returns:
        One dict per returned row (empty for statements without RETURNING)
    """
    connection = await db.connection()
    result = await connection.exec_driver_sql(sql, tuple(values))
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings()]


async def init_db() -> None:
    """Create tables that do not exist yet."""
    # Register models on the metadata
    import jobboard.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("tables_created", tables=sorted(Base.metadata.tables))


async def close_db() -> None:
    """Dispose of the connection pool."""
    await engine.dispose()
