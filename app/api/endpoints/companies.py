import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, query_filters
from app.crud import company as company_crud
from app.schemas.auth import Identity
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyListEnvelope,
    CompanySearchParams,
    CompanyUpdateRequest,
)
from app.schemas.job import DeletedResponse

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=CompanyEnvelope)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """Create a company. Admin only."""
    company = company_crud.create(db, request.model_dump(by_alias=True))
    return {"company": company}


@router.get("", response_model=CompanyListEnvelope)
def list_companies(
    filters: Dict[str, Any] = Depends(query_filters(CompanySearchParams)),
    db: Session = Depends(get_db),
):
    """
    List companies ordered by name.

    Optional query filters: name (case-insensitive substring),
    minEmployees, maxEmployees. minEmployees > maxEmployees is a 400.
    """
    return {"companies": company_crud.find_all(db, filters)}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company with its jobs."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """
    Partially update a company. Admin only.

    Accepts any of name, description, numEmployees, logoUrl.
    """
    company = company_crud.update(db, handle, request.model_dump(by_alias=True, exclude_unset=True))
    return {"company": company}


@router.delete("/{handle}", response_model=DeletedResponse)
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """Delete a company and its jobs. Admin only."""
    company_crud.remove(db, handle)
    return {"deleted": handle}
