"""
Database models for the job board.

Repositories query these tables with hand-built SQL; the models exist so
``init_db`` can create the schema.
"""
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.user import User

__all__ = [
    "Company",
    "Job",
    "User",
]
