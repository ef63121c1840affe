"""
CRUD operations for jobs.

Statements are plain parameterized SQL built with the helpers in
app.crud.sql and executed through run_query; rows come back as dicts keyed
by column name.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.database import run_query
from app.core.exceptions import DuplicateError, NotFoundError
from app.crud.sql import search_filter, sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = "id, title, salary, equity, company_handle"

# Job fields are named after their columns; nothing to map
JS_TO_SQL: Dict[str, str] = {}


def create(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a job.

    Args:
        db: Database session
        data: {title, salary, equity, companyHandle}

    Returns:
        {id, title, salary, equity, company_handle}

    Raises:
        NotFoundError: If the company does not exist
        DuplicateError: If an identical job already exists (missing salary or
            equity counts as equal to missing)
    """
    title = data["title"]
    salary = data.get("salary")
    equity = data.get("equity")
    company_handle = data["companyHandle"]

    handle_check = run_query(
        db,
        "SELECT handle FROM companies WHERE handle = $1",
        [company_handle],
    ).first()
    if handle_check is None:
        raise NotFoundError(f"No company: {company_handle}")

    duplicate_check = run_query(
        db,
        """SELECT id
           FROM jobs
           WHERE title = $1
             AND (salary = $2 OR (salary IS NULL AND $2 IS NULL))
             AND (equity = $3 OR (equity IS NULL AND $3 IS NULL))
             AND company_handle = $4""",
        [title, salary, equity, company_handle],
    ).first()
    if duplicate_check is not None:
        raise DuplicateError(f"Duplicate job: {title}")

    job = run_query(
        db,
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}""",
        [title, salary, equity, company_handle],
    ).mappings().first()
    db.commit()

    logger.info(f"Created job {job['id']}: {title} ({company_handle})")
    return dict(job)


def find_all(db: Session, criteria: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List jobs ordered by title.

    Args:
        db: Database session
        criteria: Optional filters: title, minSalary, hasEquity

    Returns:
        List of {id, title, salary, equity, company_handle}
    """
    cols, values = search_filter(criteria)
    where = f"WHERE {cols}" if cols else ""

    rows = run_query(
        db,
        f"""SELECT {JOB_COLUMNS}
            FROM jobs
            {where}
            ORDER BY title""",
        values,
    ).mappings().all()
    return [dict(row) for row in rows]


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no such job
    """
    job = run_query(
        db,
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        [job_id],
    ).mappings().first()

    if job is None:
        raise NotFoundError(f"No job: {job_id}")

    return dict(job)


def get_by_company(db: Session, handle: str) -> List[Dict[str, Any]]:
    """Jobs posted by one company, as [{id, title, salary, equity}, ...]."""
    rows = run_query(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    ).mappings().all()
    return [dict(row) for row in rows]


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job: only the fields present in data change.

    Args:
        db: Database session
        job_id: Job ID to update
        data: Any of {title, salary, equity}

    Raises:
        InvalidInputError: If data is empty
        NotFoundError: If no such job
    """
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    id_idx = len(values) + 1

    job = run_query(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = ${id_idx}
            RETURNING {JOB_COLUMNS}""",
        [*values, job_id],
    ).mappings().first()

    if job is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return dict(job)


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job.

    Raises:
        NotFoundError: If no such job
    """
    deleted = run_query(
        db,
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        [job_id],
    ).first()

    if deleted is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
