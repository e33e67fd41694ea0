# jobly/services/job_service.py
"""
job_service.py
- Purpose: Job use-cases: create, search, get (with company), partial update, delete.
- Owns: the parent-company existence check before insert.
"""

import logging
from typing import Any

from jobly.core.errors import not_found
from jobly.db.store import Store
from jobly.helpers.sql import sql_for_partial_update
from jobly.repos.company.read import CompanyReadRepo
from jobly.repos.job.read import JobReadRepo
from jobly.repos.job.write import JobWriteRepo
from jobly.validations.update_validators import restrict_update_fields

logger = logging.getLogger("jobly.job_service")

JOB_UPDATE_FIELDS = ("title", "salary", "equity")


class JobService:
    def __init__(self, store: Store):
        self.store = store

        self.company_read = CompanyReadRepo(store)
        self.job_read = JobReadRepo(store)
        self.job_write = JobWriteRepo(store)

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a job from {title, salary, equity, companyHandle}.

        The company must already exist. The check and the insert are separate
        statements; the jobs.company_handle foreign key catches a company
        deleted in between (surfacing as a store failure).
        """
        company_handle = data["companyHandle"]
        if not self.company_read.exists(company_handle):
            raise not_found(f"No company: {company_handle}", details={"handle": company_handle})

        job = self.job_write.insert(
            company_handle,
            title=data["title"],
            salary=data.get("salary"),
            equity=data.get("equity"),
        )
        logger.info("job.created", extra={"job_id": job["id"], "handle": company_handle})
        return job

    def find_all(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """
        Filters (all optional): title (case-insensitive partial match),
        minSalary, hasEquity (only jobs with non-zero equity). Ordered by title.
        """
        return self.job_read.search(filters)

    def get(self, job_id: int) -> dict[str, Any]:
        job = self.job_read.get_by_id(job_id)
        if not job:
            raise not_found(f"No job: {job_id}", details={"id": job_id})

        job["company"] = self.company_read.get_by_handle(job.pop("companyHandle"))
        return job

    def update(self, job_id: int, data: dict[str, Any] | None) -> dict[str, Any]:
        """Partial update over {title, salary, equity}; companyHandle is immutable."""
        fields = restrict_update_fields(data, JOB_UPDATE_FIELDS)
        fragment = sql_for_partial_update(fields)

        job = self.job_write.update(job_id, fragment)
        if not job:
            raise not_found(f"No job: {job_id}", details={"id": job_id})

        logger.info("job.updated", extra={"job_id": job_id, "fields": list(fields)})
        return job

    def remove(self, job_id: int) -> int:
        deleted = self.job_write.delete(job_id)
        if deleted is None:
            raise not_found(f"No job: {job_id}", details={"id": job_id})

        logger.info("job.deleted", extra={"job_id": job_id})
        return deleted
