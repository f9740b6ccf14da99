"""
Job routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.database import get_db
from jobboard.core.logging import get_logger
from jobboard.api.deps import get_admin_user
from jobboard.repositories.job_repository import JobRepository
from jobboard.schemas.auth import TokenUser
from jobboard.schemas.base import DeletedResponse
from jobboard.schemas.job import JobCreate, JobResponse, JobUpdate

logger = get_logger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_repo = JobRepository()


@router.get("/", response_model=List[JobResponse])
async def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive partial title"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(
        None,
        alias="hasEquity",
        description="true: equity > 0, false: equity = 0, omitted: no filter",
    ),
    db: AsyncSession = Depends(get_db),
):
    """
    List jobs with optional filters.
    """
    filters = {
        "title": title,
        "minSalary": min_salary,
        "hasEquity": has_equity,
    }
    rows = await job_repo.find_all(db, filters)
    return [JobResponse.model_validate(row) for row in rows]


@router.post("/", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    data: JobCreate,
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a job for an existing company."""
    row = await job_repo.create(db, data.to_fields())
    logger.info("job_created", job_id=row["id"], company=row["company_handle"])
    return JobResponse.model_validate(row)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get job details by ID.
    """
    return JobResponse.model_validate(await job_repo.get(db, job_id))


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: int,
    data: JobUpdate,
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a job; only the fields sent change."""
    fields = data.to_fields()
    row = await job_repo.update(db, job_id, fields)
    logger.info("job_updated", job_id=job_id, fields=sorted(fields))
    return JobResponse.model_validate(row)


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(
    job_id: int,
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a job."""
    await job_repo.remove(db, job_id)
    logger.info("job_deleted", job_id=job_id)
    return DeletedResponse(deleted=str(job_id))
