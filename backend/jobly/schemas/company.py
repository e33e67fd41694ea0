"""
company.py (schemas)
- Purpose: Request/response DTOs for the company domain.
- Design: Shape/type checks live here; business rules (duplicates,
  min/max employee bounds) are enforced by the service.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompanyNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(default=None, ge=0)
    logoUrl: Optional[str] = None


class CompanyUpdate(BaseModel):
    """
    Partial update. Only fields the client actually sent are applied
    (see model_dump(exclude_unset=True) in the router).
    """
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(default=None, ge=0)
    logoUrl: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: Optional[str]) -> str:
        # Omitting name leaves it alone; sending null would clear a NOT NULL column
        if v is None:
            raise ValueError("name may not be null")
        return v


class JobSummary(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None


class CompanyOut(BaseModel):
    handle: str
    name: str
    description: Optional[str] = None
    numEmployees: Optional[int] = None
    logoUrl: Optional[str] = None


class CompanyDetail(CompanyOut):
    jobs: list[JobSummary] = []


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[CompanyOut]


class CompanyDeletedResponse(BaseModel):
    deleted: str
