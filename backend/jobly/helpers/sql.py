"""
helpers/sql.py
- Purpose: Build parameterized SQL fragments for dynamic statements.
- Design: Pure functions. Values only ever travel in SqlFragment.values and are
  bound by position (:p1, :p2, ...); identifiers are validated and quoted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from jobly.core.errors import bad_request

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def placeholder(position: int) -> str:
    """Bind marker for the 1-based `position` in a fragment's value list."""
    return f":p{position}"


def positional_params(values: Sequence[Any]) -> dict[str, Any]:
    return {f"p{i}": value for i, value in enumerate(values, start=1)}


def validate_identifier(identifier: str) -> str:
    if not _IDENTIFIER_RE.match(identifier or ""):
        raise bad_request(f"Unsafe column name: {identifier!r}")
    return identifier


@dataclass(frozen=True)
class SqlFragment:
    """Ordered SQL clauses plus the values their placeholders bind, in the same order."""

    clauses: tuple[str, ...] = ()
    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if len(self.clauses) != len(self.values):
            raise ValueError("SqlFragment clauses and values must be the same length")

    @property
    def is_empty(self) -> bool:
        return not self.clauses

    @property
    def set_clause(self) -> str:
        return ", ".join(self.clauses)

    @property
    def where_clause(self) -> str:
        return " AND ".join(self.clauses)

    def next_placeholder(self) -> str:
        """Placeholder for a value appended after this fragment's own values."""
        return placeholder(len(self.values) + 1)

    def params(self) -> dict[str, Any]:
        return positional_params(self.values)


@dataclass(frozen=True)
class UpdateColumn:
    key: str
    column: str
    value: Any


def update_columns(data: Mapping[str, Any], js_to_sql: Mapping[str, str] | None = None) -> list[UpdateColumn]:
    aliases = js_to_sql or {}
    return [
        UpdateColumn(key=key, column=validate_identifier(aliases.get(key, key)), value=value)
        for key, value in data.items()
    ]


def sql_for_partial_update(
    data_to_update: Mapping[str, Any] | None,
    js_to_sql: Mapping[str, str] | None = None,
) -> SqlFragment:
    """
    Turn {field: new_value} into a SET fragment.

    {"firstName": "Aliya", "age": 32} with {"firstName": "first_name"} gives
    clauses ('"first_name"=:p1', '"age"=:p2') and values ("Aliya", 32).

    Clause order follows the mapping's order; callers that need a stable
    statement text pass fields in a fixed order.
    """
    if not data_to_update:
        raise bad_request("No data")

    columns = update_columns(data_to_update, js_to_sql)
    return SqlFragment(
        clauses=tuple(f'"{c.column}"={placeholder(i)}' for i, c in enumerate(columns, start=1)),
        values=tuple(c.value for c in columns),
    )


def where_sql(fragment: SqlFragment) -> str:
    if fragment.is_empty:
        return ""
    return " WHERE " + fragment.where_clause
