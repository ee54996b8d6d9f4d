"""Service layer entry points."""

from .company_service import CompanyService
from .job_service import JobService
from .user_service import UserService

__all__ = [
    "CompanyService",
    "JobService",
    "UserService",
]
