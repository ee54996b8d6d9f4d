"""Shared FastAPI dependency factories."""

from typing import Any, Collection

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from jobly.core.auth import get_current_user, require_admin, require_admin_or_self
from jobly.db import User, get_db
from jobly.domain.exceptions import BadRequestError
from jobly.services import CompanyService, JobService, UserService

COMPANY_INTEGER_FILTERS = frozenset({"minEmployees", "maxEmployees"})
JOB_INTEGER_FILTERS = frozenset({"minSalary"})


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_admin_user(user: User = Depends(require_admin)) -> User:
    return user


def get_self_or_admin_user(user: User = Depends(require_admin_or_self)) -> User:
    return user


def get_company_service(session: Session = Depends(get_session)) -> CompanyService:
    return CompanyService(session)


def get_job_service(session: Session = Depends(get_session)) -> JobService:
    return JobService(session)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)


def _query_filters(request: Request, integer_keys: Collection[str]) -> dict[str, Any]:
    """Collect query parameters in request order, converting numeric bounds.

    Unrecognised keys are passed through untouched so the filter builder can
    reject them by name.
    """
    filters: dict[str, Any] = {}
    for key, value in request.query_params.items():
        if key in integer_keys:
            try:
                value = int(value)
            except ValueError:
                raise BadRequestError(f"{key} must be an integer")
        filters[key] = value
    return filters


def get_company_filters(request: Request) -> dict[str, Any]:
    return _query_filters(request, COMPANY_INTEGER_FILTERS)


def get_job_filters(request: Request) -> dict[str, Any]:
    return _query_filters(request, JOB_INTEGER_FILTERS)


__all__ = [
    "get_current_user",
    "get_session",
    "get_admin_user",
    "get_self_or_admin_user",
    "get_company_service",
    "get_job_service",
    "get_user_service",
    "get_company_filters",
    "get_job_filters",
]
