"""
CRUD operations for companies.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.database import run_query
from app.core.exceptions import DuplicateError, NotFoundError
from app.crud import job as job_crud
from app.crud.sql import search_filter, sql_for_partial_update

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"

JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a company.

    Args:
        data: {handle, name, description, numEmployees, logoUrl}

    Raises:
        DuplicateError: If the handle or name is already taken
    """
    duplicate_check = run_query(
        db,
        "SELECT handle FROM companies WHERE handle = $1 OR name = $2",
        [data["handle"], data["name"]],
    ).first()
    if duplicate_check is not None:
        raise DuplicateError(f"Duplicate company: {data['handle']}")

    company = run_query(
        db,
        f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}""",
        [
            data["handle"],
            data["name"],
            data["description"],
            data.get("numEmployees"),
            data.get("logoUrl"),
        ],
    ).mappings().first()
    db.commit()

    logger.info(f"Created company {company['handle']}")
    return dict(company)


def find_all(db: Session, criteria: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List companies ordered by name.

    Args:
        criteria: Optional filters: name, minEmployees, maxEmployees
    """
    cols, values = search_filter(criteria)
    where = f"WHERE {cols}" if cols else ""

    rows = run_query(
        db,
        f"""SELECT {COMPANY_COLUMNS}
            FROM companies
            {where}
            ORDER BY name""",
        values,
    ).mappings().all()
    return [dict(row) for row in rows]


def get(db: Session, handle: str) -> Dict[str, Any]:
    """
    Retrieve a company and its jobs.

    Raises:
        NotFoundError: If no such company
    """
    company = run_query(
        db,
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        [handle],
    ).mappings().first()

    if company is None:
        raise NotFoundError(f"No company: {handle}")

    result = dict(company)
    result["jobs"] = job_crud.get_by_company(db, handle)
    return result


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a company.

    Args:
        data: Any of {name, description, numEmployees, logoUrl}

    Raises:
        InvalidInputError: If data is empty
        DuplicateError: If the new name belongs to another company
        NotFoundError: If no such company
    """
    if "name" in data:
        name_check = run_query(
            db,
            "SELECT handle FROM companies WHERE name = $1 AND handle <> $2",
            [data["name"], handle],
        ).first()
        if name_check is not None:
            raise DuplicateError(f"Duplicate company name: {data['name']}")

    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    handle_idx = len(values) + 1

    company = run_query(
        db,
        f"""UPDATE companies
            SET {set_cols}
            WHERE handle = ${handle_idx}
            RETURNING {COMPANY_COLUMNS}""",
        [*values, handle],
    ).mappings().first()

    if company is None:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Updated company {handle}: {', '.join(data)}")
    return dict(company)


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, through the foreign key, its jobs.

    Raises:
        NotFoundError: If no such company
    """
    deleted = run_query(
        db,
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        [handle],
    ).first()

    if deleted is None:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Deleted company {handle}")
