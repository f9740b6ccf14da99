"""
Pydantic schemas for API validation and serialization.
"""
from jobboard.schemas.base import (
    BaseSchema,
    RequestSchema,
    MessageResponse,
    DeletedResponse,
    ErrorResponse,
)
from jobboard.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    RefreshTokenRequest,
    TokenUser,
)
from jobboard.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    UserCreatedResponse,
)
from jobboard.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
)
from jobboard.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanyJob,
    CompanyDetail,
)

__all__ = [
    # Base
    "BaseSchema",
    "RequestSchema",
    "MessageResponse",
    "DeletedResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "RefreshTokenRequest",
    "TokenUser",
    # User
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserCreatedResponse",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyResponse",
    "CompanyJob",
    "CompanyDetail",
]
