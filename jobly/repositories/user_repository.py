"""User persistence helpers."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from jobly.db import User
from jobly.db.sql import build_set_clause
from jobly.repositories.base import SQLAlchemyRepository

USER_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


class UserRepository(SQLAlchemyRepository[User]):
    """Encapsulates user-related queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.session.get(User, username)

    def list_all(self) -> Sequence[User]:
        return self.session.scalars(select(User).order_by(User.username.asc())).all()

    def update_fields(self, username: str, changes: Mapping[str, Any]) -> int:
        return self.update_where_key(
            "users", "username", username, build_set_clause(changes, USER_COLUMNS)
        )
