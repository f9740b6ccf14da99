"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this. Statements are written
as ``$n``-parameterized SQL; filtered reads go through the predicate
compiler and partial updates through the update compiler.
"""
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.database import fetch_rows
from jobboard.core.exceptions import DuplicateValueException, NotFoundException
from jobboard.core.logging import get_logger
from jobboard.sql import EMPTY_CLAUSE, PredicateCompiler, compile_update, placeholder, quote_ident

logger = get_logger(__name__)

Row = Dict[str, Any]

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository:
    """
    Base repository providing standard CRUD operations on one table.

    Usage:
        class CompanyRepository(BaseRepository):
            def __init__(self):
                super().__init__(
                    table="companies",
                    key_column="handle",
                    columns=("handle", "name", "description"),
                    order_by="name",
                )
    """

    def __init__(
        self,
        *,
        table: str,
        key_column: str,
        columns: Sequence[str],
        order_by: str,
        name_map: Optional[Mapping[str, str]] = None,
        filters: Optional[PredicateCompiler] = None,
    ):
        self.table = table
        self.key_column = key_column
        self.columns = tuple(columns)
        self.order_by = order_by
        self.name_map = dict(name_map or {})
        self.filters = filters

    @property
    def select_list(self) -> str:
        return ", ".join(self.columns)

    def not_found(self, key: Any) -> NotFoundException:
        """Exception raised when no row has ``key``."""
        return NotFoundException(f"No {self.table} row: {key}")

    async def _execute(
        self,
        db: AsyncSession,
        sql: str,
        values: Sequence[Any] = (),
    ) -> List[Row]:
        logger.debug("executing_statement", table=self.table, sql=sql, bind_count=len(values))
        try:
            return await fetch_rows(db, sql, values)
        except IntegrityError as exc:
            if getattr(exc.orig, "sqlstate", None) != UNIQUE_VIOLATION:
                raise
            constraint = getattr(exc.orig.__cause__, "constraint_name", None)
            logger.info("unique_violation", table=self.table, constraint=constraint)
            raise DuplicateValueException(self.table, constraint) from exc

    async def find_all(
        self,
        db: AsyncSession,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> List[Row]:
        """
        Get all rows, optionally narrowed by search filters.

        With no filter contributing, the WHERE keyword is left out entirely.
        """
        clause = self.filters.compile(filters) if self.filters else EMPTY_CLAUSE

        sql = f"SELECT {self.select_list} FROM {self.table}"
        if not clause.is_empty:
            sql += f" WHERE {clause.text}"
        sql += f" ORDER BY {self.order_by}"

        return await self._execute(db, sql, clause.values)

    async def get(
        self,
        db: AsyncSession,
        key: Any,
    ) -> Row:
        """Get a single row by key."""
        rows = await self._execute(
            db,
            f"SELECT {self.select_list} FROM {self.table} WHERE {self.key_column} = $1",
            [key],
        )
        if not rows:
            raise self.not_found(key)
        return rows[0]

    async def exists(
        self,
        db: AsyncSession,
        key: Any,
    ) -> bool:
        """Check if a row with ``key`` exists."""
        rows = await self._execute(
            db,
            f"SELECT {self.key_column} FROM {self.table} WHERE {self.key_column} = $1",
            [key],
        )
        return bool(rows)

    async def insert(
        self,
        db: AsyncSession,
        row: Mapping[str, Any],
    ) -> Row:
        """
        Insert a row given as column -> value and return it.

        Raises:
            DuplicateValueException: If the row hits a unique constraint
        """
        columns = ", ".join(quote_ident(column) for column in row)
        params = ", ".join(placeholder(cursor) for cursor in range(len(row)))
        rows = await self._execute(
            db,
            f"INSERT INTO {self.table} ({columns}) VALUES ({params}) "
            f"RETURNING {self.select_list}",
            list(row.values()),
        )
        return rows[0]

    async def update(
        self,
        db: AsyncSession,
        key: Any,
        fields: Mapping[str, Any],
    ) -> Row:
        """
        Partially update a row; only the given fields change.

        Raises:
            EmptyInputException: If ``fields`` is empty
            NotFoundException: If no row has ``key``
            DuplicateValueException: If the new values hit a unique constraint
        """
        clause = compile_update(fields, self.name_map)
        rows = await self._execute(
            db,
            f"UPDATE {self.table} SET {clause.text} "
            f"WHERE {self.key_column} = {clause.next_placeholder} "
            f"RETURNING {self.select_list}",
            [*clause.values, key],
        )
        if not rows:
            raise self.not_found(key)
        return rows[0]

    async def remove(
        self,
        db: AsyncSession,
        key: Any,
    ) -> None:
        """Hard delete a row by key."""
        rows = await self._execute(
            db,
            f"DELETE FROM {self.table} WHERE {self.key_column} = $1 "
            f"RETURNING {self.key_column}",
            [key],
        )
        if not rows:
            raise self.not_found(key)
