"""Builders for parameterized SQL fragments.

The builders turn a sparse, ordered mapping of logical field names into a
``SET`` list or a ``WHERE`` predicate that uses positional ``$n``
placeholders, plus the matching list of values. Placeholder numbers follow
the iteration order of the input mapping, so callers must pass an
insertion-ordered mapping (a plain ``dict`` is fine).

Nothing here touches a connection. Repositories hand the fragments to
:func:`to_named_params` and execute them through ``sqlalchemy.text``.

Example:
    >>> build_set_clause({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
    SqlFragment(clause='"first_name"=$1, "age"=$2', values=['Aliya', 32])
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, NamedTuple

from jobly.domain.exceptions import EmptyUpdateError, InvalidRangeError, UnknownFilterKeyError

_PLACEHOLDER = re.compile(r"\$(\d+)")
_ILIKE = re.compile(r"\bILIKE\b")


class SqlFragment(NamedTuple):
    """A clause with ``$1..$N`` placeholders and the values bound to them, in order."""

    clause: str
    values: list[Any]


def build_set_clause(fields: Mapping[str, Any], name_map: Mapping[str, str]) -> SqlFragment:
    """Build the column list of a partial ``UPDATE``.

    ``name_map`` translates logical names to column names; keys missing from
    it are used verbatim. Raises :class:`EmptyUpdateError` when ``fields`` is
    empty.
    """
    if not fields:
        raise EmptyUpdateError()

    assignments = [
        f'"{name_map.get(key, key)}"=${position}'
        for position, key in enumerate(fields, start=1)
    ]
    return SqlFragment(", ".join(assignments), list(fields.values()))


# --------------------------------------------------------------------------
# Filters


def _unchanged(value: Any) -> Any:
    return value


def _contains(value: Any) -> str:
    return f"%{value}%"


def _zero(_value: Any) -> int:
    return 0


@dataclass(frozen=True)
class FilterRule:
    """Clause template (``{n}`` is the placeholder number) and value transform."""

    template: str
    transform: Callable[[Any], Any] = _unchanged

    def render(self, value: Any, position: int) -> tuple[str, Any]:
        return self.template.format(n=position), self.transform(value)


RuleSelector = Callable[[Any], FilterRule]


def _fixed(rule: FilterRule) -> RuleSelector:
    return lambda _value: rule


_HAS_EQUITY = FilterRule("equity > ${n}", _zero)
_ANY_EQUITY = FilterRule("equity >= ${n}", _zero)


def _equity_rule(value: Any) -> FilterRule:
    # Only the literal string "true" narrows the result; any other value,
    # "false" included, matches every row because equity is never negative.
    return _HAS_EQUITY if value == "true" else _ANY_EQUITY


COMPANY_FILTER_RULES: Mapping[str, RuleSelector] = {
    "name": _fixed(FilterRule("name ILIKE ${n}", _contains)),
    "minEmployees": _fixed(FilterRule("num_employees >= ${n}")),
    "maxEmployees": _fixed(FilterRule("num_employees <= ${n}")),
}

JOB_FILTER_RULES: Mapping[str, RuleSelector] = {
    "title": _fixed(FilterRule("title ILIKE ${n}", _contains)),
    "minSalary": _fixed(FilterRule("salary >= ${n}")),
    "hasEquity": _equity_rule,
}


def build_filter(query: Mapping[str, Any], rules: Mapping[str, RuleSelector]) -> SqlFragment:
    """Translate ``query`` into an ``AND``-joined predicate using ``rules``.

    Raises :class:`UnknownFilterKeyError` for the first key without a rule.
    An empty query yields an empty clause.
    """
    clauses = []
    values = []
    for position, (key, raw) in enumerate(query.items(), start=1):
        select = rules.get(key)
        if select is None:
            raise UnknownFilterKeyError(key)
        clause, value = select(raw).render(raw, position)
        clauses.append(clause)
        values.append(value)
    return SqlFragment(" AND ".join(clauses), values)


def build_company_filter(query: Mapping[str, Any]) -> SqlFragment:
    """WHERE predicate for company search (``name``, ``minEmployees``, ``maxEmployees``)."""
    if "minEmployees" in query and "maxEmployees" in query:
        if query["minEmployees"] > query["maxEmployees"]:
            raise InvalidRangeError("minEmployees cannot be greater than maxEmployees")
    return build_filter(query, COMPANY_FILTER_RULES)


def build_job_filter(query: Mapping[str, Any]) -> SqlFragment:
    """WHERE predicate for job search (``title``, ``minSalary``, ``hasEquity``)."""
    return build_filter(query, JOB_FILTER_RULES)


# --------------------------------------------------------------------------
# Execution helpers


def to_named_params(clause: str, values: list[Any]) -> tuple[str, dict[str, Any]]:
    """Rewrite ``$n`` placeholders as ``:pn`` binds for ``sqlalchemy.text``.

    >>> to_named_params("salary >= $1 AND title ILIKE $2", [10, "%dev%"])
    ('salary >= :p1 AND title ILIKE :p2', {'p1': 10, 'p2': '%dev%'})
    """
    sql = _PLACEHOLDER.sub(lambda match: f":p{match.group(1)}", clause)
    params = {f"p{position}": value for position, value in enumerate(values, start=1)}
    return sql, params


def adapt_for_dialect(sql: str, dialect_name: str) -> str:
    """Adjust operators a dialect lacks.

    SQLite has no ``ILIKE``; its ``LIKE`` already ignores ASCII case.
    """
    if dialect_name == "sqlite":
        return _ILIKE.sub("LIKE", sql)
    return sql
