"""Database utility helpers."""

from __future__ import annotations

from sqlalchemy.orm import Session

from jobly.core.config import settings
from jobly.core.logging import get_logger
from jobly.db.models import Base, User

logger = get_logger(__name__)


def seed_default_data(db_session: Session) -> None:
    """Create tables and a default admin account outside production (idempotent)."""
    if settings.is_production:
        logger.info("Skipping default seed in production environment")
        return

    Base.metadata.create_all(bind=db_session.connection())

    if db_session.get(User, "admin") is None:
        from jobly.core.auth import get_password_hash  # avoid circular import at module load

        db_session.add(
            User(
                username="admin",
                password=get_password_hash(settings.admin_default_password),
                first_name="Admin",
                last_name="User",
                email="admin@jobly.local",
                is_admin=True,
            )
        )
        db_session.commit()
        logger.info("Created default admin user (username: admin)")
