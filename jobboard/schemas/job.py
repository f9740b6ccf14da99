"""
Job schemas.
"""
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from jobboard.schemas.base import BaseSchema, RequestSchema, reject_null


class JobCreate(RequestSchema):
    """Job creation schema."""

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(RequestSchema):
    """Job update schema. The id cannot change."""

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: Optional[str] = Field(None, min_length=1, max_length=25)

    @field_validator("title", "company_handle")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class JobResponse(BaseSchema):
    """Job response schema."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str
