import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, query_filters
from app.crud import job as job_crud
from app.schemas.auth import Identity
from app.schemas.job import (
    DeletedResponse,
    JobCreateRequest,
    JobEnvelope,
    JobListEnvelope,
    JobSearchParams,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """
    Create a job. Admin only.

    The company referenced by companyHandle must exist, and an identical job
    (same title, salary, equity and company) must not.
    """
    job = job_crud.create(db, request.model_dump(by_alias=True))
    logger.info(f"Job {job['id']} created by {admin.username}")
    return {"job": job}


@router.get("", response_model=JobListEnvelope)
def list_jobs(
    filters: Dict[str, Any] = Depends(query_filters(JobSearchParams)),
    db: Session = Depends(get_db),
):
    """
    List jobs ordered by title.

    Optional query filters:
    - title: case-insensitive substring match
    - minSalary: jobs paying at least this much
    - hasEquity: true to only list jobs with non-zero equity

    Any other query parameter is rejected with 400.
    """
    return {"jobs": job_crud.find_all(db, filters)}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """
    Partially update a job. Admin only.

    Accepts any of title, salary, equity. companyHandle cannot be changed.
    """
    job = job_crud.update(db, job_id, request.model_dump(by_alias=True, exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=DeletedResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """Delete a job by ID. Admin only."""
    job_crud.remove(db, job_id)
    return {"deleted": str(job_id)}
