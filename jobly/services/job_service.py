"""Job management services."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.orm import Session

from jobly.core.logging import get_logger
from jobly.core.metrics import record_mutation, record_search
from jobly.db import Job
from jobly.domain.exceptions import DuplicateEntityError, NotFoundError
from jobly.repositories import CompanyRepository, JobRepository

logger = get_logger(__name__)


class JobService:
    """Business logic around job postings."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.jobs = JobRepository(session)
        self.companies = CompanyRepository(session)

    def create_job(self, payload) -> Job:
        if not self.companies.get_by_handle(payload.company_handle):
            raise NotFoundError(f"No company: {payload.company_handle}")
        if self.jobs.find_identical(
            payload.title, payload.salary, payload.equity, payload.company_handle
        ):
            raise DuplicateEntityError(f"Duplicate job: {payload.title}, {payload.company_handle}")

        job = Job(**payload.model_dump())
        self.jobs.add(job)
        self.jobs.commit()
        self.jobs.refresh(job)
        record_mutation("job", "create")
        logger.info("Created job %s for %s", job.id, job.company_handle)
        return job

    def list_jobs(self, filters: Mapping[str, Any]) -> Sequence[Job]:
        jobs = self.jobs.search(filters)
        record_search("job", bool(filters))
        return jobs

    def get_job(self, job_id: int) -> Job:
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        return job

    def update_job(self, job_id: int, changes: Mapping[str, Any]) -> Job:
        """Apply a partial update of title, salary and/or equity."""
        if not self.jobs.update_fields(job_id, changes):
            self.jobs.rollback()
            raise NotFoundError(f"No job: {job_id}")
        self.jobs.commit()
        record_mutation("job", "update")
        logger.info("Updated job %s fields=%s", job_id, sorted(changes))
        return self.get_job(job_id)

    def delete_job(self, job_id: int) -> None:
        job = self.get_job(job_id)
        self.jobs.remove(job)
        self.jobs.commit()
        record_mutation("job", "delete")
        logger.info("Deleted job %s", job_id)
