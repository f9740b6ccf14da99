"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Any] = None,
    ):
        super().__init__(400, code, message, details)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


# Query building exceptions
class QueryBuildException(BadRequestException):
    """
    Base for errors raised while compiling SET / WHERE clauses.

    ``details`` names the filter dimension and the violated constraint so the
    client can tell which part of its input was rejected.
    """

    def __init__(
        self,
        message: str,
        code: str,
        *,
        dimension: Optional[str] = None,
        constraint: Optional[str] = None,
    ):
        self.dimension = dimension
        self.constraint = constraint
        super().__init__(
            message=message,
            code=code,
            details={"dimension": dimension, "constraint": constraint},
        )


class EmptyInputException(QueryBuildException):
    """Partial update called without any field"""

    def __init__(self):
        super().__init__(
            message="No data",
            code="NO_DATA",
            constraint="non_empty",
        )


class MissingFilterException(QueryBuildException):
    """A filter rule was invoked without a usable value"""

    def __init__(self, dimension: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"Missing value for filter '{dimension}'",
            code="MISSING_FILTER",
            dimension=dimension,
            constraint="required",
        )


class InvalidFilterException(QueryBuildException):
    """A filter value has the wrong type (e.g. a number where text is expected)"""

    def __init__(self, dimension: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"Invalid value for filter '{dimension}'",
            code="INVALID_FILTER",
            dimension=dimension,
            constraint="type",
        )


class InvertedRangeException(QueryBuildException):
    """Range filter with min greater than max"""

    def __init__(self, dimension: str, minimum: Any, maximum: Any):
        super().__init__(
            message=f"Minimum ({minimum}) cannot exceed maximum ({maximum}) for '{dimension}'",
            code="INVERTED_RANGE",
            dimension=dimension,
            constraint="min_le_max",
        )


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Invalid username or password"""

    def __init__(self):
        super().__init__(
            message="Invalid username or password",
            code="INVALID_CREDENTIALS",
        )


class InvalidTokenException(UnauthorizedException):
    """Token is invalid"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
        )


# Resource specific exceptions
class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self, username: Optional[str] = None):
        message = f"No user: {username}" if username else "User not found"
        super().__init__(message=message, code="USER_NOT_FOUND")


class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self, job_id: Optional[int] = None):
        message = f"No job: {job_id}" if job_id is not None else "Job not found"
        super().__init__(message=message, code="JOB_NOT_FOUND")


class CompanyNotFoundException(NotFoundException):
    """Company not found"""

    def __init__(self, handle: Optional[str] = None):
        message = f"No company: {handle}" if handle else "Company not found"
        super().__init__(message=message, code="COMPANY_NOT_FOUND")


class DuplicateCompanyException(ConflictException):
    """Company handle already taken"""

    def __init__(self, handle: str):
        super().__init__(
            message=f"Duplicate company: {handle}",
            code="COMPANY_EXISTS",
        )


class UsernameAlreadyExistsException(ConflictException):
    """Username already registered"""

    def __init__(self, username: str):
        super().__init__(
            message=f"Duplicate username: {username}",
            code="USERNAME_EXISTS",
        )


class DuplicateValueException(ConflictException):
    """A write hit a unique constraint (e.g. a company name already in use)"""

    def __init__(self, table: str, constraint: Optional[str] = None):
        target = f" ({constraint})" if constraint else ""
        super().__init__(
            message=f"Duplicate value in {table}{target}",
            code="DUPLICATE_VALUE",
        )
