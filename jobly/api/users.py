"""User management API endpoints."""

from fastapi import APIRouter, Depends, Request, status

from jobly.core.audit import (
    AuditAction,
    AuditContext,
    AuditOutcome,
    audit_log,
)
from jobly.db import User
from jobly.dependencies import get_admin_user, get_self_or_admin_user, get_user_service
from jobly.schemas.user import AdminUserCreate, UserDetail, UserResponse, UserUpdate
from jobly.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def list_users(
    service: UserService = Depends(get_user_service),
    _: User = Depends(get_admin_user),
) -> list[UserResponse]:
    """List all users (admin only)."""
    return [UserResponse.model_validate(user) for user in service.list_users()]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    request: Request,
    payload: AdminUserCreate,
    service: UserService = Depends(get_user_service),
    admin: User = Depends(get_admin_user),
) -> UserResponse:
    """Create a user, optionally an admin (admin only)."""
    user = service.register(payload)
    audit_log(
        AuditAction.USER_CREATE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, admin),
        resource_type="user",
        resource_id=user.username,
        changes={"isAdmin": user.is_admin},
    )
    return UserResponse.model_validate(user)


@router.get("/{username}", response_model=UserDetail)
def get_user(
    username: str,
    service: UserService = Depends(get_user_service),
    _: User = Depends(get_self_or_admin_user),
) -> UserDetail:
    """Get a user and the ids of jobs they applied to."""
    return UserDetail.from_user(service.get_user(username))


@router.patch("/{username}", response_model=UserResponse)
def update_user(
    username: str,
    request: Request,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_self_or_admin_user),
) -> UserResponse:
    """Partially update a profile. Changing ``isAdmin`` requires an admin."""
    changes = payload.changes()
    user = service.update_user(username, changes, current_user)
    audit_log(
        AuditAction.USER_UPDATE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, current_user),
        resource_type="user",
        resource_id=username,
        changes=changes,
    )
    return UserResponse.model_validate(user)


@router.delete("/{username}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    username: str,
    request: Request,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_self_or_admin_user),
) -> None:
    service.delete_user(username)
    audit_log(
        AuditAction.USER_DELETE,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, current_user),
        resource_type="user",
        resource_id=username,
    )


@router.post("/{username}/jobs/{job_id}", status_code=status.HTTP_201_CREATED)
def apply_to_job(
    username: str,
    job_id: int,
    request: Request,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_self_or_admin_user),
) -> dict:
    """Record an application by ``username`` to a job."""
    service.apply_to_job(username, job_id)
    audit_log(
        AuditAction.USER_APPLY,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, current_user),
        resource_type="job",
        resource_id=str(job_id),
        details={"applicant": username},
    )
    return {"applied": job_id}
