"""Audit trail for logins, registrations and admin mutations.

Events go to the ``jobly.audit`` logger. The structured payload travels in
``extra`` so :class:`jobly.core.logging.JSONFormatter` emits it as fields.
Successful events log at INFO, everything else at WARNING.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from .logging import get_logger

MASK = "********"
SENSITIVE_KEYS = frozenset({"password", "token", "access_token", "secret"})

audit_logger = get_logger("jobly.audit")


class AuditAction(str, Enum):
    LOGIN_SUCCESS = "auth.login.success"
    LOGIN_FAILURE = "auth.login.failure"
    REGISTER = "auth.register"

    COMPANY_CREATE = "company.create"
    COMPANY_UPDATE = "company.update"
    COMPANY_DELETE = "company.delete"

    JOB_CREATE = "job.create"
    JOB_UPDATE = "job.update"
    JOB_DELETE = "job.delete"

    USER_CREATE = "user.create"
    USER_UPDATE = "user.update"
    USER_DELETE = "user.delete"
    USER_APPLY = "user.apply"


class AuditOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    DENIED = "denied"


@dataclass
class AuditContext:
    """The acting user and where the request came from."""

    username: Optional[str] = None
    is_admin: Optional[bool] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    request_id: Optional[str] = None

    @classmethod
    def from_request(cls, request: Any, user: Optional[Any] = None) -> "AuditContext":
        """Read client address and headers from ``request``.

        The first ``X-Forwarded-For`` hop is preferred over the socket peer.
        """
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ip_address = forwarded.split(",")[0].strip()
        elif request.client:
            ip_address = request.client.host
        else:
            ip_address = None

        context = cls(
            ip_address=ip_address,
            user_agent=request.headers.get("user-agent"),
            request_id=request.headers.get("x-request-id"),
        )
        if user is not None:
            context.username = user.username
            context.is_admin = user.is_admin
        return context


@dataclass
class AuditEvent:
    action: AuditAction
    outcome: AuditOutcome
    context: AuditContext = field(default_factory=AuditContext)
    resource_type: Optional[str] = None
    resource_id: Optional[str] = None
    changes: Optional[dict[str, Any]] = None
    details: dict[str, Any] = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def message(self) -> str:
        return f"AUDIT: {self.action.value} - {self.outcome.value}"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "audit": True,
            "action": self.action.value,
            "outcome": self.outcome.value,
            "occurred_at": self.occurred_at.isoformat(),
            "context": asdict(self.context),
        }
        if self.resource_type:
            payload["resource"] = {"type": self.resource_type, "id": self.resource_id}
        if self.changes is not None:
            payload["changes"] = mask_sensitive_data(self.changes)
        if self.details:
            payload["details"] = self.details
        return payload


def emit(event: AuditEvent) -> None:
    """Write ``event`` to the audit logger."""
    level = "info" if event.outcome is AuditOutcome.SUCCESS else "warning"
    getattr(audit_logger, level)(event.message, extra=event.to_dict())


def audit_log(
    action: AuditAction,
    outcome: AuditOutcome,
    *,
    context: Optional[AuditContext] = None,
    resource_type: Optional[str] = None,
    resource_id: Optional[str] = None,
    changes: Optional[dict[str, Any]] = None,
    details: Optional[dict[str, Any]] = None,
) -> None:
    """Build and emit an audit event.

    Example:
        >>> audit_log(
        ...     AuditAction.COMPANY_DELETE,
        ...     AuditOutcome.SUCCESS,
        ...     resource_type="company",
        ...     resource_id="apple",
        ... )
    """
    emit(
        AuditEvent(
            action=action,
            outcome=outcome,
            context=context or AuditContext(),
            resource_type=resource_type,
            resource_id=resource_id,
            changes=changes,
            details=details or {},
        )
    )


def mask_sensitive_data(data: dict[str, Any]) -> dict[str, Any]:
    """Replace values of password-like keys with a fixed mask."""
    return {key: MASK if key.lower() in SENSITIVE_KEYS else value for key, value in data.items()}
