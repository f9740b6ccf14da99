"""
Company schemas.
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from jobboard.schemas.base import BaseSchema, RequestSchema, reject_null


class CompanyCreate(RequestSchema):
    """Company creation schema."""

    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(RequestSchema):
    """Company update schema. The handle cannot change."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None

    @field_validator("name", "description")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class CompanyResponse(BaseSchema):
    """Company response schema."""

    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(BaseSchema):
    """Job listed under a company."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None


class CompanyDetail(CompanyResponse):
    """Company with its jobs."""

    jobs: List[CompanyJob] = []
