"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from jobly.core import settings
from jobly.core.audit import (
    AuditAction,
    AuditContext,
    AuditOutcome,
    audit_log,
)
from jobly.core.auth import create_access_token
from jobly.core.metrics import record_auth_attempt
from jobly.dependencies import get_user_service
from jobly.domain.exceptions import UnauthorizedError
from jobly.schemas.auth import Token, UserLogin
from jobly.schemas.user import UserCreate
from jobly.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

# Rate limiter for auth endpoints - disabled during testing
limiter = Limiter(key_func=get_remote_address, enabled=not settings.testing)


@router.post("/token", response_model=Token)
@limiter.limit(settings.auth_rate_limit)
def login(
    request: Request,
    credentials: UserLogin,
    service: UserService = Depends(get_user_service),
) -> Token:
    """Exchange username and password for a bearer token."""
    try:
        user = service.authenticate(credentials.username, credentials.password)
    except UnauthorizedError:
        record_auth_attempt(success=False)
        context = AuditContext.from_request(request)
        context.username = credentials.username
        audit_log(
            AuditAction.LOGIN_FAILURE,
            AuditOutcome.FAILURE,
            context=context,
            details={"reason": "invalid_credentials"},
        )
        raise

    record_auth_attempt(success=True)
    audit_log(
        AuditAction.LOGIN_SUCCESS,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, user),
    )
    return Token(access_token=create_access_token(user))


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.auth_rate_limit)
def register(
    request: Request,
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
) -> Token:
    """Create a regular (non-admin) account and return a token for it."""
    user = service.register(payload)
    audit_log(
        AuditAction.REGISTER,
        AuditOutcome.SUCCESS,
        context=AuditContext.from_request(request, user),
        resource_type="user",
        resource_id=user.username,
    )
    return Token(access_token=create_access_token(user))
