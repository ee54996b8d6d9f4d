"""User account services."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.orm import Session

from jobly.core.auth import get_password_hash, verify_password
from jobly.core.logging import get_logger
from jobly.core.metrics import record_mutation
from jobly.db import User
from jobly.domain.exceptions import (
    DuplicateEntityError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from jobly.repositories import JobRepository, UserRepository

logger = get_logger(__name__)


class UserService:
    """Registration, authentication and profile management."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.jobs = JobRepository(session)

    def register(self, payload) -> User:
        """Create an account. Only admin-issued payloads carry ``is_admin``."""
        if self.users.get_by_username(payload.username):
            raise DuplicateEntityError(f"Duplicate username: {payload.username}")

        data = payload.model_dump(exclude={"password", "is_admin"})
        user = User(
            **data,
            password=get_password_hash(payload.password),
            is_admin=getattr(payload, "is_admin", False),
        )
        self.users.add(user)
        self.users.commit()
        self.users.refresh(user)
        record_mutation("user", "create")
        logger.info("Registered user %s (admin=%s)", user.username, user.is_admin)
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self.users.get_by_username(username)
        if not user or not verify_password(password, user.password):
            raise UnauthorizedError("Invalid username/password")
        return user

    def list_users(self) -> Sequence[User]:
        return self.users.list_all()

    def get_user(self, username: str) -> User:
        user = self.users.get_by_username(username)
        if not user:
            raise NotFoundError(f"No user: {username}")
        return user

    def update_user(self, username: str, changes: Mapping[str, Any], acting_user: User) -> User:
        """Partial update keyed by wire names (``firstName``, ``isAdmin``, ...)."""
        if "isAdmin" in changes and not acting_user.is_admin:
            raise ForbiddenError("Only admins may change admin status")

        changes = dict(changes)
        if "password" in changes:
            changes["password"] = get_password_hash(changes["password"])

        if not self.users.update_fields(username, changes):
            self.users.rollback()
            raise NotFoundError(f"No user: {username}")
        self.users.commit()
        record_mutation("user", "update")
        logger.info("Updated user %s fields=%s", username, sorted(changes))
        return self.get_user(username)

    def delete_user(self, username: str) -> None:
        user = self.get_user(username)
        self.users.remove(user)
        self.users.commit()
        record_mutation("user", "delete")
        logger.info("Deleted user %s", username)

    def apply_to_job(self, username: str, job_id: int) -> None:
        user = self.get_user(username)
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        if job in user.applied_jobs:
            raise DuplicateEntityError(f"{username} already applied to job {job_id}")
        user.applied_jobs.append(job)
        self.users.commit()
        record_mutation("application", "create")
        logger.info("User %s applied to job %s", username, job_id)
