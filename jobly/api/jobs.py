"""Job API endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Request, status

from jobly.core.audit import (
    AuditAction,
    AuditContext,
    AuditOutcome,
    audit_log,
)
from jobly.db import User
from jobly.dependencies import get_admin_user, get_job_filters, get_job_service
from jobly.schemas.job import JobCreate, JobResponse, JobUpdate
from jobly.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    request: Request,
    payload: JobCreate,
    service: JobService = Depends(get_job_service),
    admin: User = Depends(get_admin_user),
) -> JobResponse:
    """Post a job for an existing company (admin only)."""
    job = service.create_job(payload)
    audit_log(
        AuditAction.JOB_CREATE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, admin),
        resource_type="job",
        resource_id=str(job.id),
        changes=payload.model_dump(mode="json", by_alias=True),
    )
    return JobResponse.model_validate(job)


@router.get("", response_model=list[JobResponse])
def list_jobs(
    filters: dict[str, Any] = Depends(get_job_filters),
    service: JobService = Depends(get_job_service),
) -> list[JobResponse]:
    """List jobs, optionally filtered by title, minSalary and hasEquity."""
    return [JobResponse.model_validate(job) for job in service.list_jobs(filters)]


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: int,
    service: JobService = Depends(get_job_service),
) -> JobResponse:
    return JobResponse.model_validate(service.get_job(job_id))


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: Request,
    payload: JobUpdate,
    service: JobService = Depends(get_job_service),
    admin: User = Depends(get_admin_user),
) -> JobResponse:
    """Partially update a job's title, salary or equity (admin only)."""
    changes = payload.changes()
    job = service.update_job(job_id, changes)
    audit_log(
        AuditAction.JOB_UPDATE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, admin),
        resource_type="job",
        resource_id=str(job_id),
        changes=changes,
    )
    return JobResponse.model_validate(job)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: int,
    request: Request,
    service: JobService = Depends(get_job_service),
    admin: User = Depends(get_admin_user),
) -> None:
    service.delete_job(job_id)
    audit_log(
        AuditAction.JOB_DELETE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, admin),
        resource_type="job",
        resource_id=str(job_id),
    )
