"""
Base schemas and common response models.

The API speaks camelCase (``numEmployees``, ``logoUrl``); Python code uses
snake_case attribute names and the alias generator bridges the two.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RequestSchema(BaseSchema):
    """Request body schema; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    def to_fields(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by their API names."""
        return self.model_dump(exclude_unset=True, by_alias=True)


def reject_null(value: Any) -> Any:
    """Validator for optional-in-PATCH fields whose column is NOT NULL."""
    if value is None:
        raise ValueError("may not be null")
    return value


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str


class DeletedResponse(BaseSchema):
    """Response after deleting a resource."""

    deleted: str


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: str
    details: Optional[Any] = None
