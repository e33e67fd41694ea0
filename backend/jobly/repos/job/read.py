"""
job/read.py
- Purpose: Read-side DB operations for Job.
"""

from typing import Any

from jobly.db.store import Store
from jobly.helpers.filters import FilterComposer, FilterKind, FilterRule
from jobly.helpers.sql import where_sql

# equity is NUMERIC in storage; clients get a float
JOB_COLUMNS = (
    "id, title, salary, CAST(equity AS FLOAT) AS equity, "
    'company_handle AS "companyHandle"'
)

JOB_FILTERS = FilterComposer(
    rules=(
        FilterRule("title", "title", FilterKind.CONTAINS),
        FilterRule("minSalary", "salary", FilterKind.AT_LEAST),
        FilterRule("hasEquity", "equity", FilterKind.NONZERO),
    ),
)


class JobReadRepo:
    def __init__(self, store: Store):
        self.store = store

    def get_by_id(self, job_id: int) -> dict[str, Any] | None:
        return self.store.first(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :p1",
            [job_id],
            op="job.get",
        )

    def search(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        fragment = JOB_FILTERS.with_like_operator(self.store.ilike_operator).compose(filters)
        return self.store.rows(
            f"SELECT {JOB_COLUMNS} FROM jobs{where_sql(fragment)} ORDER BY title",
            fragment.values,
            op="job.find_all",
        )
