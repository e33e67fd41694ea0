"""
db/store.py
- Purpose: The single seam between the companies/jobs core and the database.
- Contract: execute(statement text, ordered values) -> rows as dicts.
  Values are bound positionally: values[0] -> :p1, values[1] -> :p2, ...
  Nothing is ever formatted into the statement text here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobly.core.errors import store_failure
from jobly.helpers.sql import positional_params

logger = logging.getLogger("jobly.store")


class Store:
    def __init__(self, db: Session):
        self.db = db

    @property
    def dialect_name(self) -> str:
        return self.db.get_bind().dialect.name

    @property
    def ilike_operator(self) -> str:
        # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII.
        return "ILIKE" if self.dialect_name == "postgresql" else "LIKE"

    def rows(self, sql: str, values: Sequence[Any] = (), *, op: str) -> list[dict[str, Any]]:
        try:
            result = self.db.execute(text(sql), positional_params(values))
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(
                "db.query_failed",
                extra={"op": op, "error_type": type(exc).__name__},
            )
            raise store_failure(
                f"Database error during {op}",
                details={"op": op},
            ) from exc

    def first(self, sql: str, values: Sequence[Any] = (), *, op: str) -> dict[str, Any] | None:
        found = self.rows(sql, values, op=op)
        return found[0] if found else None

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("db.commit_failed", extra={"error_type": type(exc).__name__})
            raise store_failure("Database error during commit") from exc
