"""Company persistence helpers."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from jobly.db import Company
from jobly.db.sql import build_company_filter, build_set_clause
from jobly.repositories.base import SQLAlchemyRepository

COMPANY_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyRepository(SQLAlchemyRepository[Company]):
    """Company data access."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_handle(self, handle: str) -> Optional[Company]:
        return self.session.get(Company, handle)

    def get_by_name(self, name: str) -> Optional[Company]:
        return self.session.scalars(select(Company).where(Company.name == name)).first()

    def search(self, filters: Mapping[str, Any]) -> Sequence[Company]:
        """Companies matching ``filters`` (see ``build_company_filter``), by name."""
        stmt = select(Company).order_by(Company.name.asc())
        where = self.predicate(build_company_filter(filters))
        if where is not None:
            stmt = stmt.where(where)
        return self.session.scalars(stmt).all()

    def update_fields(self, handle: str, changes: Mapping[str, Any]) -> int:
        return self.update_where_key(
            "companies", "handle", handle, build_set_clause(changes, COMPANY_COLUMNS)
        )
