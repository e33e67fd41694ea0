"""
helpers/filters.py
- Purpose: Turn optional search filters into a parameterized WHERE fragment.
- Design: Each search declares its rules once, in a fixed order. Predicates and
  placeholders follow that order, never the order of keys in the input, so the
  same filters always yield the same SQL text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from jobly.core.errors import bad_request
from jobly.helpers.sql import SqlFragment, placeholder, validate_identifier


# Escape char for CONTAINS patterns; user input never acts as a LIKE wildcard
LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class FilterKind(str, Enum):
    CONTAINS = "contains"    # case-insensitive partial match
    AT_LEAST = "at_least"
    AT_MOST = "at_most"
    NONZERO = "nonzero"      # flag: column != 0


@dataclass(frozen=True)
class FilterRule:
    key: str
    column: str
    kind: FilterKind

    def applies(self, value: Any) -> bool:
        if self.kind is FilterKind.CONTAINS:
            return value is not None and value != ""
        if self.kind is FilterKind.NONZERO:
            return bool(value)
        return value is not None

    def predicate(self, position: int, like_operator: str) -> str:
        ph = placeholder(position)
        if self.kind is FilterKind.CONTAINS:
            return f"{self.column} {like_operator} {ph} ESCAPE '{LIKE_ESCAPE}'"
        if self.kind is FilterKind.AT_LEAST:
            return f"{self.column} >= {ph}"
        if self.kind is FilterKind.AT_MOST:
            return f"{self.column} <= {ph}"
        return f"{self.column} != {ph}"

    def bind_value(self, value: Any) -> Any:
        if self.kind is FilterKind.CONTAINS:
            return f"%{escape_like(str(value))}%"
        if self.kind is FilterKind.NONZERO:
            return 0
        return value


@dataclass(frozen=True)
class FilterComposer:
    rules: tuple[FilterRule, ...]
    # (lower_key, upper_key) pairs that must satisfy lower <= upper when both are given
    ranges: tuple[tuple[str, str], ...] = ()
    like_operator: str = "ILIKE"

    def __post_init__(self) -> None:
        for rule in self.rules:
            validate_identifier(rule.column)

    def with_like_operator(self, like_operator: str) -> "FilterComposer":
        return replace(self, like_operator=like_operator)

    def check_ranges(self, filters: Mapping[str, Any]) -> None:
        for lower_key, upper_key in self.ranges:
            lower, upper = filters.get(lower_key), filters.get(upper_key)
            if lower is not None and upper is not None and lower > upper:
                raise bad_request(
                    f"{lower_key} cannot be greater than {upper_key}",
                    details={lower_key: lower, upper_key: upper},
                )

    def compose(self, filters: Mapping[str, Any] | None = None) -> SqlFragment:
        filters = filters or {}
        self.check_ranges(filters)

        clauses: list[str] = []
        values: list[Any] = []
        for rule in self.rules:
            value = filters.get(rule.key)
            if not rule.applies(value):
                continue
            values.append(rule.bind_value(value))
            clauses.append(rule.predicate(len(values), self.like_operator))

        return SqlFragment(clauses=tuple(clauses), values=tuple(values))
