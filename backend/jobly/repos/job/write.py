"""
job/write.py
- Purpose: Write-side DB operations for Job.
- Design: No business logic; persistence only.
"""

from typing import Any

from jobly.db.store import Store
from jobly.helpers.sql import SqlFragment
from jobly.repos.job.read import JOB_COLUMNS


class JobWriteRepo:
    def __init__(self, store: Store):
        self.store = store

    def insert(
        self,
        company_handle: str,
        *,
        title: str,
        salary: int | None = None,
        equity: float | None = None,
    ) -> dict[str, Any]:
        job = self.store.first(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES (:p1, :p2, :p3, :p4)
                RETURNING {JOB_COLUMNS}""",
            [title, salary, equity, company_handle],
            op="job.create",
        )
        self.store.commit()
        return job

    def update(self, job_id: int, fragment: SqlFragment) -> dict[str, Any] | None:
        job = self.store.first(
            f"""UPDATE jobs
                SET {fragment.set_clause}
                WHERE id = {fragment.next_placeholder()}
                RETURNING {JOB_COLUMNS}""",
            [*fragment.values, job_id],
            op="job.update",
        )
        if job is not None:
            self.store.commit()
        return job

    def delete(self, job_id: int) -> int | None:
        deleted = self.store.first(
            "DELETE FROM jobs WHERE id = :p1 RETURNING id",
            [job_id],
            op="job.remove",
        )
        if deleted is None:
            return None
        self.store.commit()
        return deleted["id"]
