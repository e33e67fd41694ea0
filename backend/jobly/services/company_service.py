# jobly/services/company_service.py
"""
company_service.py
- Purpose: Company use-cases: create, search, get (with jobs), partial update, delete.
- Owns: uniqueness + existence checks and turning zero-row results into NotFound.
- Design: Thick service over thin repos; routers stay thin.
"""

import logging
from typing import Any

from jobly.core.errors import conflict, not_found
from jobly.db.store import Store
from jobly.helpers.sql import sql_for_partial_update
from jobly.repos.company.read import CompanyReadRepo
from jobly.repos.company.write import CompanyWriteRepo
from jobly.validations.update_validators import restrict_update_fields

logger = logging.getLogger("jobly.company_service")

COMPANY_UPDATE_FIELDS = ("name", "description", "numEmployees", "logoUrl")
COMPANY_COLUMN_ALIASES = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyService:
    def __init__(self, store: Store):
        self.store = store

        self.company_read = CompanyReadRepo(store)
        self.company_write = CompanyWriteRepo(store)

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a company from {handle, name, description, numEmployees, logoUrl}.

        Raises conflict if the handle or the name is already taken.
        """
        handle = data["handle"]
        if self.company_read.exists(handle):
            raise conflict(f"Duplicate company: {handle}", details={"handle": handle})
        self._check_name_free(data["name"])

        company = self.company_write.insert(
            handle,
            name=data["name"],
            description=data.get("description"),
            num_employees=data.get("numEmployees"),
            logo_url=data.get("logoUrl"),
        )
        logger.info("company.created", extra={"handle": handle})
        return company

    def find_all(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """
        Filters (all optional): name (case-insensitive partial match),
        min_employees, max_employees. Results ordered by name.
        """
        return self.company_read.search(filters)

    def get(self, handle: str) -> dict[str, Any]:
        company = self.company_read.get_by_handle(handle)
        if not company:
            raise not_found(f"No company: {handle}", details={"handle": handle})

        company["jobs"] = self.company_read.list_jobs(handle)
        return company

    def update(self, handle: str, data: dict[str, Any] | None) -> dict[str, Any]:
        """
        Partial update: only the provided fields among
        {name, description, numEmployees, logoUrl} change.
        """
        fields = restrict_update_fields(data, COMPANY_UPDATE_FIELDS)
        fragment = sql_for_partial_update(fields, COMPANY_COLUMN_ALIASES)

        if "name" in fields:
            self._check_name_free(fields["name"], handle=handle)

        company = self.company_write.update(handle, fragment)
        if not company:
            raise not_found(f"No company: {handle}", details={"handle": handle})

        logger.info("company.updated", extra={"handle": handle, "fields": list(fields)})
        return company

    def _check_name_free(self, name: str, *, handle: str | None = None) -> None:
        """Conflict when another company already uses this name (names are unique)."""
        owner = self.company_read.handle_for_name(name)
        if owner is None or owner == handle:
            return
        if handle is not None and not self.company_read.exists(handle):
            raise not_found(f"No company: {handle}", details={"handle": handle})
        raise conflict(f"Duplicate company name: {name}", details={"name": name, "handle": owner})

    def remove(self, handle: str) -> str:
        deleted = self.company_write.delete(handle)
        if deleted is None:
            raise not_found(f"No company: {handle}", details={"handle": handle})

        logger.info("company.deleted", extra={"handle": handle})
        return deleted
