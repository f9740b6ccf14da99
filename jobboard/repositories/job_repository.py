"""
Job repository - data access for Job entity.
"""
from typing import Any, List, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.exceptions import BadRequestException, JobNotFoundException
from jobboard.repositories.base import BaseRepository, Row
from jobboard.sql import JOB_FILTERS


class JobRepository(BaseRepository):
    def __init__(self):
        super().__init__(
            table="jobs",
            key_column="id",
            columns=("id", "title", "salary", "equity", "company_handle"),
            order_by="id",
            name_map={"companyHandle": "company_handle"},
            filters=JOB_FILTERS,
        )

    def not_found(self, key: Any) -> JobNotFoundException:
        return JobNotFoundException(key)

    async def _ensure_company(self, db: AsyncSession, handle: str) -> None:
        rows = await self._execute(
            db,
            "SELECT handle FROM companies WHERE handle = $1",
            [handle],
        )
        if not rows:
            raise BadRequestException(f"No company: {handle}", code="UNKNOWN_COMPANY")

    async def create(
        self,
        db: AsyncSession,
        data: Mapping[str, Any],
    ) -> Row:
        """
        Create a job from ``{title, salary, equity, companyHandle}``.

        Raises:
            BadRequestException: If the company does not exist
        """
        await self._ensure_company(db, data["companyHandle"])
        return await self.insert(db, {
            "title": data["title"],
            "salary": data.get("salary"),
            "equity": data.get("equity"),
            "company_handle": data["companyHandle"],
        })

    async def update(
        self,
        db: AsyncSession,
        key: Any,
        fields: Mapping[str, Any],
    ) -> Row:
        """Partially update a job; moving it checks the target company."""
        if fields.get("companyHandle") is not None:
            await self._ensure_company(db, fields["companyHandle"])
        return await super().update(db, key, fields)

    async def find_by_company(
        self,
        db: AsyncSession,
        handle: str,
    ) -> List[Row]:
        """Get all jobs posted by a company."""
        return await self._execute(
            db,
            "SELECT id, title, salary, equity FROM jobs WHERE company_handle = $1 ORDER BY id",
            [handle],
        )
