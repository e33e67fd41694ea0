"""
jobs.py
- Purpose: API routes for jobs.
- Design: Keep router thin. Delegate business logic to JobService.
"""

from fastapi import APIRouter, Depends, Query, status

from jobly.api.deps import get_job_service
from jobly.auth.deps import require_admin
from jobly.schemas.job import (
    JobDeletedResponse,
    JobDetailResponse,
    JobListResponse,
    JobNew,
    JobResponse,
    JobUpdate,
)
from jobly.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_job(body: JobNew, svc: JobService = Depends(get_job_service)):
    return {"job": svc.create(body.model_dump())}


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: str | None = Query(None),
    minSalary: int | None = Query(None, ge=0),
    hasEquity: bool | None = Query(None),
    svc: JobService = Depends(get_job_service),
):
    """hasEquity=true limits results to jobs with non-zero equity; false is the same as absent."""
    filters = {"title": title, "minSalary": minSalary, "hasEquity": hasEquity}
    return {"jobs": svc.find_all(filters)}


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, svc: JobService = Depends(get_job_service)):
    return {"job": svc.get(job_id)}


@router.patch("/{job_id}", response_model=JobResponse, dependencies=[Depends(require_admin)])
def update_job(job_id: int, body: JobUpdate, svc: JobService = Depends(get_job_service)):
    return {"job": svc.update(job_id, body.model_dump(exclude_unset=True))}


@router.delete("/{job_id}", response_model=JobDeletedResponse, dependencies=[Depends(require_admin)])
def delete_job(job_id: int, svc: JobService = Depends(get_job_service)):
    return {"deleted": svc.remove(job_id)}
