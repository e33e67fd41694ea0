"""
company/write.py
- Purpose: Write-side DB operations for Company.
- Design: No business logic. Only persistence and minimal mapping.
"""

from typing import Any

from jobly.db.store import Store
from jobly.helpers.sql import SqlFragment
from jobly.repos.company.read import COMPANY_COLUMNS


class CompanyWriteRepo:
    def __init__(self, store: Store):
        self.store = store

    def insert(
        self,
        handle: str,
        *,
        name: str,
        description: str | None = None,
        num_employees: int | None = None,
        logo_url: str | None = None,
    ) -> dict[str, Any]:
        company = self.store.first(
            f"""INSERT INTO companies
                (handle, name, description, num_employees, logo_url)
                VALUES (:p1, :p2, :p3, :p4, :p5)
                RETURNING {COMPANY_COLUMNS}""",
            [handle, name, description, num_employees, logo_url],
            op="company.create",
        )
        self.store.commit()
        return company

    def update(self, handle: str, fragment: SqlFragment) -> dict[str, Any] | None:
        company = self.store.first(
            f"""UPDATE companies
                SET {fragment.set_clause}
                WHERE handle = {fragment.next_placeholder()}
                RETURNING {COMPANY_COLUMNS}""",
            [*fragment.values, handle],
            op="company.update",
        )
        if company is not None:
            self.store.commit()
        return company

    def delete(self, handle: str) -> str | None:
        deleted = self.store.first(
            "DELETE FROM companies WHERE handle = :p1 RETURNING handle",
            [handle],
            op="company.remove",
        )
        if deleted is None:
            return None
        self.store.commit()
        return deleted["handle"]
