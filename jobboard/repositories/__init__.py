"""
Repository layer - data access abstraction.

Repositories handle all database statements, keeping SQL out of the
service and route layers.
"""
from jobboard.repositories.base import BaseRepository
from jobboard.repositories.company_repository import CompanyRepository
from jobboard.repositories.job_repository import JobRepository
from jobboard.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "JobRepository",
    "UserRepository",
]
