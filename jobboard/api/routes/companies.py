"""
Company routes.

Thin controllers - CompanyService does the work.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.database import get_db
from jobboard.api.deps import get_admin_user
from jobboard.services.company_service import CompanyService
from jobboard.schemas.auth import TokenUser
from jobboard.schemas.company import CompanyCreate, CompanyDetail, CompanyResponse, CompanyUpdate
from jobboard.schemas.base import DeletedResponse

router = APIRouter(prefix="/companies", tags=["companies"])

company_service = CompanyService()


@router.get("/", response_model=List[CompanyResponse])
async def list_companies(
    name_like: Optional[str] = Query(None, alias="nameLike", description="Case-insensitive partial name"),
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    db: AsyncSession = Depends(get_db),
):
    """
    List companies, optionally filtered.

    A ``minEmployees`` greater than ``maxEmployees`` is a 400.
    """
    filters = {
        "nameLike": name_like,
        "minEmployees": min_employees,
        "maxEmployees": max_employees,
    }
    return await company_service.list_companies(db, filters)


@router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(
    data: CompanyCreate,
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new company."""
    return await company_service.create_company(db, data.to_fields())


@router.get("/{handle}", response_model=CompanyDetail)
async def get_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a single company and its jobs."""
    return await company_service.get_company(db, handle)


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(
    handle: str,
    data: CompanyUpdate,
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a company's details; only the fields sent change."""
    return await company_service.update_company(db, handle, data.to_fields())


@router.delete("/{handle}", response_model=DeletedResponse)
async def delete_company(
    handle: str,
    admin: TokenUser = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a company and its jobs."""
    await company_service.remove_company(db, handle)
    return DeletedResponse(deleted=handle)
