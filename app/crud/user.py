"""
CRUD operations for users.

Passwords are stored as bcrypt hashes and never returned.
"""

import logging
from typing import Any, Dict, List, Mapping
from sqlalchemy.orm import Session

from app.core.database import run_query
from app.core.exceptions import DuplicateError, NotFoundError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.crud.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

USER_COLUMNS = "username, first_name, last_name, email, is_admin"

JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
}


def authenticate(db: Session, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: If the user does not exist or the password is wrong
    """
    user = run_query(
        db,
        f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
        [username],
    ).mappings().first()

    if user is None or not verify_password(password, user["password"]):
        logger.warning(f"Failed login for {username}")
        raise UnauthorizedError("Invalid username/password")

    result = dict(user)
    del result["password"]
    return result


def register(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a user with a hashed password.

    Args:
        data: {username, password, firstName, lastName, email, isAdmin}

    Raises:
        DuplicateError: If the username is taken
    """
    duplicate_check = run_query(
        db,
        "SELECT username FROM users WHERE username = $1",
        [data["username"]],
    ).first()
    if duplicate_check is not None:
        raise DuplicateError(f"Duplicate username: {data['username']}")

    user = run_query(
        db,
        f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {USER_COLUMNS}""",
        [
            data["username"],
            get_password_hash(data["password"]),
            data["firstName"],
            data["lastName"],
            data["email"],
            data.get("isAdmin", False),
        ],
    ).mappings().first()
    db.commit()

    logger.info(f"Registered user {data['username']}")
    return dict(user)


def find_all(db: Session) -> List[Dict[str, Any]]:
    """List all users ordered by username."""
    rows = run_query(
        db,
        f"SELECT {USER_COLUMNS} FROM users ORDER BY username",
    ).mappings().all()
    return [dict(row) for row in rows]


def get(db: Session, username: str) -> Dict[str, Any]:
    """
    Retrieve a user by username.

    Raises:
        NotFoundError: If no such user
    """
    user = run_query(
        db,
        f"SELECT {USER_COLUMNS} FROM users WHERE username = $1",
        [username],
    ).mappings().first()

    if user is None:
        raise NotFoundError(f"No user: {username}")

    return dict(user)


def update(db: Session, username: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a user. A new password is hashed before storing.

    Args:
        data: Any of {password, firstName, lastName, email}

    Raises:
        InvalidInputError: If data is empty
        NotFoundError: If no such user
    """
    data = dict(data)
    if "password" in data:
        data["password"] = get_password_hash(data["password"])

    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    username_idx = len(values) + 1

    user = run_query(
        db,
        f"""UPDATE users
            SET {set_cols}
            WHERE username = ${username_idx}
            RETURNING {USER_COLUMNS}""",
        [*values, username],
    ).mappings().first()

    if user is None:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Updated user {username}")
    return dict(user)


def remove(db: Session, username: str) -> None:
    """
    Delete a user.

    Raises:
        NotFoundError: If no such user
    """
    deleted = run_query(
        db,
        "DELETE FROM users WHERE username = $1 RETURNING username",
        [username],
    ).first()

    if deleted is None:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Deleted user {username}")
