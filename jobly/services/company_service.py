"""Company management services."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.logging import get_logger
from jobly.core.metrics import record_mutation, record_search
from jobly.db import Company
from jobly.domain.exceptions import DuplicateEntityError, NotFoundError
from jobly.repositories import CompanyRepository

logger = get_logger(__name__)


class CompanyService:
    """Business logic around companies."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.companies = CompanyRepository(session)

    def create_company(self, payload) -> Company:
        if self.companies.get_by_handle(payload.handle):
            raise DuplicateEntityError(f"Duplicate company: {payload.handle}")
        if self.companies.get_by_name(payload.name):
            raise DuplicateEntityError(f"Duplicate company name: {payload.name}")

        company = Company(**payload.model_dump())
        self.companies.add(company)
        try:
            self.companies.commit()
        except IntegrityError as exc:
            self.companies.rollback()
            raise DuplicateEntityError(f"Duplicate company: {payload.handle}") from exc
        self.companies.refresh(company)
        record_mutation("company", "create")
        logger.info("Created company %s", company.handle)
        return company

    def list_companies(self, filters: Mapping[str, Any]) -> Sequence[Company]:
        companies = self.companies.search(filters)
        record_search("company", bool(filters))
        return companies

    def get_company(self, handle: str) -> Company:
        company = self.companies.get_by_handle(handle)
        if not company:
            raise NotFoundError(f"No company: {handle}")
        return company

    def update_company(self, handle: str, changes: Mapping[str, Any]) -> Company:
        """Apply a partial update keyed by wire names (``numEmployees``, ``logoUrl``)."""
        name = changes.get("name")
        if name is not None:
            existing = self.companies.get_by_name(name)
            if existing and existing.handle != handle:
                raise DuplicateEntityError(f"Duplicate company name: {name}")

        try:
            updated = self.companies.update_fields(handle, changes)
        except IntegrityError as exc:
            self.companies.rollback()
            if name is not None:
                raise DuplicateEntityError(f"Duplicate company name: {name}") from exc
            raise
        if not updated:
            self.companies.rollback()
            raise NotFoundError(f"No company: {handle}")
        self.companies.commit()
        record_mutation("company", "update")
        logger.info("Updated company %s fields=%s", handle, sorted(changes))
        return self.get_company(handle)

    def delete_company(self, handle: str) -> None:
        company = self.get_company(handle)
        self.companies.remove(company)
        self.companies.commit()
        record_mutation("company", "delete")
        logger.info("Deleted company %s", handle)
