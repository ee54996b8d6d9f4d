"""Company API endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Request, status

from jobly.core.audit import (
    AuditAction,
    AuditContext,
    AuditOutcome,
    audit_log,
)
from jobly.db import User
from jobly.dependencies import get_admin_user, get_company_filters, get_company_service
from jobly.schemas.company import CompanyCreate, CompanyDetail, CompanyResponse, CompanyUpdate
from jobly.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    request: Request,
    payload: CompanyCreate,
    service: CompanyService = Depends(get_company_service),
    admin: User = Depends(get_admin_user),
) -> CompanyResponse:
    """Create a company (admin only)."""
    company = service.create_company(payload)
    audit_log(
        AuditAction.COMPANY_CREATE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, admin),
        resource_type="company",
        resource_id=company.handle,
        changes=payload.model_dump(mode="json", by_alias=True),
    )
    return CompanyResponse.model_validate(company)


@router.get("", response_model=list[CompanyResponse])
def list_companies(
    filters: dict[str, Any] = Depends(get_company_filters),
    service: CompanyService = Depends(get_company_service),
) -> list[CompanyResponse]:
    """List companies, optionally filtered by name, minEmployees and maxEmployees."""
    companies = service.list_companies(filters)
    return [CompanyResponse.model_validate(company) for company in companies]


@router.get("/{handle}", response_model=CompanyDetail)
def get_company(
    handle: str,
    service: CompanyService = Depends(get_company_service),
) -> CompanyDetail:
    """Get a company together with its jobs."""
    return CompanyDetail.model_validate(service.get_company(handle))


@router.patch("/{handle}", response_model=CompanyResponse)
def update_company(
    handle: str,
    request: Request,
    payload: CompanyUpdate,
    service: CompanyService = Depends(get_company_service),
    admin: User = Depends(get_admin_user),
) -> CompanyResponse:
    """Partially update a company (admin only)."""
    changes = payload.changes()
    company = service.update_company(handle, changes)
    audit_log(
        AuditAction.COMPANY_UPDATE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, admin),
        resource_type="company",
        resource_id=handle,
        changes=changes,
    )
    return CompanyResponse.model_validate(company)


@router.delete("/{handle}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(
    handle: str,
    request: Request,
    service: CompanyService = Depends(get_company_service),
    admin: User = Depends(get_admin_user),
) -> None:
    """Delete a company and its jobs (admin only)."""
    service.delete_company(handle)
    audit_log(
        AuditAction.COMPANY_DELETE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, admin),
        resource_type="company",
        resource_id=handle,
    )
