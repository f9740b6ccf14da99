"""Core module exports."""
from jobboard.core.config import settings, get_settings
from jobboard.core.database import Base, get_db, init_db, close_db, engine, async_session_maker, fetch_rows
from jobboard.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_token_type,
)
from jobboard.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    QueryBuildException,
    EmptyInputException,
    MissingFilterException,
    InvalidFilterException,
    InvertedRangeException,
    InvalidCredentialsException,
    InvalidTokenException,
    UserNotFoundException,
    JobNotFoundException,
    CompanyNotFoundException,
    DuplicateCompanyException,
    UsernameAlreadyExistsException,
    DuplicateValueException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    "fetch_rows",
    # Security
    "verify_password",
    "hash_password",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "verify_token_type",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "QueryBuildException",
    "EmptyInputException",
    "MissingFilterException",
    "InvalidFilterException",
    "InvertedRangeException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "UserNotFoundException",
    "JobNotFoundException",
    "CompanyNotFoundException",
    "DuplicateCompanyException",
    "UsernameAlreadyExistsException",
    "DuplicateValueException",
]
