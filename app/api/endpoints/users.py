"""
User management endpoints.

Listing and creating users is admin only; a single account can be read,
updated or deleted by an admin or by its owner.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, ensure_admin_or_self
from app.core.security import create_token
from app.crud import user as user_crud
from app.schemas.auth import Identity
from app.schemas.job import DeletedResponse
from app.schemas.user import (
    UserCreateRequest,
    UserCreatedEnvelope,
    UserEnvelope,
    UserListEnvelope,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=UserCreatedEnvelope)
def create_user(
    request: UserCreateRequest,
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """Create a user, optionally an admin. Admin only. Returns the user and a token."""
    user = user_crud.register(db, request.model_dump(by_alias=True))
    logger.info(f"User {user['username']} created by {admin.username}")
    return {"user": user, "token": create_token(user["username"], bool(user["is_admin"]))}


@router.get("", response_model=UserListEnvelope)
def list_users(
    db: Session = Depends(get_db),
    admin: Identity = Depends(ensure_admin),
):
    """List all users. Admin only."""
    return {"users": user_crud.find_all(db)}


@router.get("/{username}", response_model=UserEnvelope)
def get_user(
    username: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(ensure_admin_or_self),
):
    return {"user": user_crud.get(db, username)}


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    request: UserUpdateRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(ensure_admin_or_self),
):
    """Partially update a user: any of password, firstName, lastName, email."""
    user = user_crud.update(db, username, request.model_dump(by_alias=True, exclude_unset=True))
    return {"user": user}


@router.delete("/{username}", response_model=DeletedResponse)
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(ensure_admin_or_self),
):
    user_crud.remove(db, username)
    return {"deleted": username}
