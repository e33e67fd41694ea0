"""
job.py (schemas)
- Purpose: Request/response DTOs for the job domain.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobly.schemas.company import CompanyOut


class JobNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)
    companyHandle: str = Field(min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """companyHandle is immutable and not accepted here."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title may not be null")
        return v


class JobOut(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    companyHandle: str


class JobDetail(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company: CompanyOut


class JobResponse(BaseModel):
    job: JobOut


class JobDetailResponse(BaseModel):
    job: JobDetail


class JobListResponse(BaseModel):
    jobs: list[JobOut]


class JobDeletedResponse(BaseModel):
    deleted: int
