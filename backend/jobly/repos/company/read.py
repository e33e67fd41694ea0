"""
company/read.py
- Purpose: Read-side DB operations for Company.
- Design: Keep query text here for reuse and testability; every value is bound.
"""

from typing import Any

from jobly.db.store import Store
from jobly.helpers.filters import FilterComposer, FilterKind, FilterRule
from jobly.helpers.sql import where_sql

COMPANY_COLUMNS = (
    "handle, name, description, "
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

COMPANY_FILTERS = FilterComposer(
    rules=(
        FilterRule("name", "name", FilterKind.CONTAINS),
        FilterRule("min_employees", "num_employees", FilterKind.AT_LEAST),
        FilterRule("max_employees", "num_employees", FilterKind.AT_MOST),
    ),
    ranges=(("min_employees", "max_employees"),),
)


class CompanyReadRepo:
    def __init__(self, store: Store):
        self.store = store

    def get_by_handle(self, handle: str) -> dict[str, Any] | None:
        return self.store.first(
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                WHERE handle = :p1""",
            [handle],
            op="company.get",
        )

    def exists(self, handle: str) -> bool:
        found = self.store.first(
            "SELECT handle FROM companies WHERE handle = :p1",
            [handle],
            op="company.exists",
        )
        return found is not None

    def handle_for_name(self, name: str) -> str | None:
        found = self.store.first(
            "SELECT handle FROM companies WHERE name = :p1",
            [name],
            op="company.name_owner",
        )
        return found["handle"] if found else None

    def search(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        fragment = COMPANY_FILTERS.with_like_operator(self.store.ilike_operator).compose(filters)
        return self.store.rows(
            f"SELECT {COMPANY_COLUMNS} FROM companies{where_sql(fragment)} ORDER BY name",
            fragment.values,
            op="company.find_all",
        )

    def list_jobs(self, handle: str) -> list[dict[str, Any]]:
        return self.store.rows(
            """SELECT id, title, salary, CAST(equity AS FLOAT) AS equity
               FROM jobs
               WHERE company_handle = :p1
               ORDER BY id""",
            [handle],
            op="company.jobs",
        )
