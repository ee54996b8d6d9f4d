"""Repository layer for persistence access."""

from .company_repository import CompanyRepository
from .job_repository import JobRepository
from .user_repository import UserRepository

__all__ = [
    "CompanyRepository",
    "JobRepository",
    "UserRepository",
]
