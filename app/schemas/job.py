from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobCreateRequest(CamelModel):
    """Schema for creating a new job"""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, strict=True)
    equity: Optional[float] = Field(None, ge=0, le=1, strict=True)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(CamelModel):
    """
    Schema for a partial job update.

    companyHandle is not accepted: a job cannot move to another company.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, strict=True)
    equity: Optional[float] = Field(None, ge=0, le=1, strict=True)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title cannot be null")
        return v


class JobSearchParams(CamelModel):
    """Query-string filters for GET /jobs"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: Optional[bool] = None


class JobResponse(CamelModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str


class CompanyJobResponse(CamelModel):
    """Job as listed under its company (no companyHandle)"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]


class DeletedResponse(BaseModel):
    deleted: str
