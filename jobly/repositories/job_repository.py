"""Job persistence helpers."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from jobly.db import Job
from jobly.db.sql import build_job_filter, build_set_clause
from jobly.repositories.base import SQLAlchemyRepository

# Logical and physical names coincide for every updatable job field.
JOB_COLUMNS: Mapping[str, str] = {}


class JobRepository(SQLAlchemyRepository[Job]):
    """Job data access."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_id(self, job_id: int) -> Optional[Job]:
        return self.session.get(Job, job_id)

    def find_identical(
        self,
        title: str,
        salary: Optional[int],
        equity: Optional[Decimal],
        company_handle: str,
    ) -> Optional[Job]:
        stmt = select(Job).where(
            Job.title == title,
            Job.company_handle == company_handle,
            Job.salary.is_(None) if salary is None else Job.salary == salary,
            Job.equity.is_(None) if equity is None else Job.equity == equity,
        )
        return self.session.scalars(stmt).first()

    def search(self, filters: Mapping[str, Any]) -> Sequence[Job]:
        """Jobs matching ``filters`` (see ``build_job_filter``), by title then id."""
        stmt = select(Job).order_by(Job.title.asc(), Job.id.asc())
        where = self.predicate(build_job_filter(filters))
        if where is not None:
            stmt = stmt.where(where)
        return self.session.scalars(stmt).all()

    def update_fields(self, job_id: int, changes: Mapping[str, Any]) -> int:
        return self.update_where_key("jobs", "id", job_id, build_set_clause(changes, JOB_COLUMNS))
