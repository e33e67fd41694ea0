"""
companies.py
- Purpose: API routes for companies.
- Design: Keep router thin. Delegate business logic to CompanyService.
  Reads are public; mutations require an admin token.
"""

from fastapi import APIRouter, Depends, Query, status

from jobly.api.deps import get_company_service
from jobly.auth.deps import require_admin
from jobly.schemas.company import (
    CompanyDeletedResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyNew,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_company(body: CompanyNew, svc: CompanyService = Depends(get_company_service)):
    return {"company": svc.create(body.model_dump())}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: str | None = Query(None),
    min_employees: int | None = Query(None, ge=0),
    max_employees: int | None = Query(None, ge=0),
    svc: CompanyService = Depends(get_company_service),
):
    filters = {"name": name, "min_employees": min_employees, "max_employees": max_employees}
    return {"companies": svc.find_all(filters)}


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str, svc: CompanyService = Depends(get_company_service)):
    return {"company": svc.get(handle)}


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(require_admin)])
def update_company(handle: str, body: CompanyUpdate, svc: CompanyService = Depends(get_company_service)):
    return {"company": svc.update(handle, body.model_dump(exclude_unset=True))}


@router.delete("/{handle}", response_model=CompanyDeletedResponse, dependencies=[Depends(require_admin)])
def delete_company(handle: str, svc: CompanyService = Depends(get_company_service)):
    return {"deleted": svc.remove(handle)}
