"""
Service layer - business logic between routes and repositories.
"""
from jobboard.services.auth_service import AuthService
from jobboard.services.company_service import CompanyService
from jobboard.services.user_service import UserService

__all__ = [
    "AuthService",
    "CompanyService",
    "UserService",
]
