from typing import List, Optional
from pydantic import ConfigDict, Field, BaseModel, field_validator, model_validator

from app.schemas.job import CamelModel, CompanyJobResponse


class CompanyCreateRequest(CamelModel):
    """Schema for creating a new company"""
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0, strict=True)
    logo_url: Optional[str] = None


class CompanyUpdateRequest(CamelModel):
    """Schema for a partial company update. The handle cannot change."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, strict=True)
    logo_url: Optional[str] = None

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("field cannot be null")
        return v


class CompanySearchParams(CamelModel):
    """Query-string filters for GET /companies"""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_employee_range(self):
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValueError("minEmployees cannot be greater than maxEmployees")
        return self


class CompanyResponse(CamelModel):
    """Schema for company response"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyDetailResponse(CompanyResponse):
    """Single company, including its jobs"""
    jobs: List[CompanyJobResponse] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetailResponse


class CompanyListEnvelope(BaseModel):
    companies: List[CompanyResponse]
