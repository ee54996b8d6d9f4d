"""Base repository utilities."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import CursorResult
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import TextClause

from jobly.db.sql import SqlFragment, adapt_for_dialect, to_named_params

TModel = TypeVar("TModel")


class SQLAlchemyRepository(Generic[TModel]):
    """Base repository storing the SQLAlchemy session.

    Besides the usual unit-of-work helpers it knows how to run the
    ``$n``-style fragments produced by :mod:`jobly.db.sql`.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, instance: TModel) -> TModel:
        self.session.add(instance)
        return instance

    def remove(self, instance: TModel) -> None:
        self.session.delete(instance)

    def refresh(self, instance: TModel) -> TModel:
        self.session.refresh(instance)
        return instance

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def flush(self) -> None:
        self.session.flush()

    # ------------------------------------------------------------------
    # Fragment execution

    @property
    def dialect_name(self) -> str:
        return self.session.get_bind().dialect.name

    def predicate(self, fragment: SqlFragment) -> Optional[TextClause]:
        """Turn a WHERE fragment into a bound ``text()`` clause, or None if empty."""
        if not fragment.clause:
            return None
        sql, params = to_named_params(fragment.clause, fragment.values)
        return text(adapt_for_dialect(sql, self.dialect_name)).bindparams(**params)

    def execute_fragment(self, statement: str, values: list[Any]) -> CursorResult:
        """Execute a full ``$n``-placeholder statement with positional values."""
        sql, params = to_named_params(statement, values)
        return self.session.execute(text(adapt_for_dialect(sql, self.dialect_name)), params)

    def update_where_key(
        self, table: str, key_column: str, key: Any, assignments: SqlFragment
    ) -> int:
        """Apply a SET fragment to the row whose ``key_column`` equals ``key``.

        The key is bound to the placeholder after the last SET value.
        Returns the number of rows changed.
        """
        key_position = len(assignments.values) + 1
        statement = (
            f'UPDATE {table} SET {assignments.clause} WHERE "{key_column}" = ${key_position}'
        )
        result = self.execute_fragment(statement, [*assignments.values, key])
        return result.rowcount
