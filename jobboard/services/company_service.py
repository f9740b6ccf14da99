"""
Company service - business logic for company listing and management.

Keeps the routes thin: the company detail view joins in the company's jobs
and every write is logged here.
"""
from typing import Any, List, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.logging import get_logger
from jobboard.repositories.company_repository import CompanyRepository
from jobboard.repositories.job_repository import JobRepository
from jobboard.schemas.company import CompanyDetail, CompanyJob, CompanyResponse

logger = get_logger(__name__)


class CompanyService:
    """Handles company listing and management."""

    def __init__(self):
        self.company_repo = CompanyRepository()
        self.job_repo = JobRepository()

    async def list_companies(
        self,
        db: AsyncSession,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> List[CompanyResponse]:
        """
        Get companies ordered by name.

        ``filters`` may hold ``nameLike``, ``minEmployees`` and
        ``maxEmployees``; None values are ignored.
        """
        rows = await self.company_repo.find_all(db, filters)
        return [CompanyResponse.model_validate(row) for row in rows]

    async def get_company(
        self,
        db: AsyncSession,
        handle: str,
    ) -> CompanyDetail:
        """Get a company with the jobs it posted."""
        company = await self.company_repo.get(db, handle)
        jobs = await self.job_repo.find_by_company(db, handle)
        return CompanyDetail(
            **company,
            jobs=[CompanyJob.model_validate(job) for job in jobs],
        )

    async def create_company(
        self,
        db: AsyncSession,
        data: Mapping[str, Any],
    ) -> CompanyResponse:
        row = await self.company_repo.create(db, data)
        logger.info("company_created", handle=row["handle"])
        return CompanyResponse.model_validate(row)

    async def update_company(
        self,
        db: AsyncSession,
        handle: str,
        fields: Mapping[str, Any],
    ) -> CompanyResponse:
        row = await self.company_repo.update(db, handle, fields)
        logger.info("company_updated", handle=handle, fields=sorted(fields))
        return CompanyResponse.model_validate(row)

    async def remove_company(
        self,
        db: AsyncSession,
        handle: str,
    ) -> None:
        await self.company_repo.remove(db, handle)
        logger.info("company_deleted", handle=handle)
