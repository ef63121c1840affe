"""
Authentication endpoints:
- POST /token: Exchange username/password for a JWT
- POST /register: Create a (non-admin) account and receive a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_token
from app.crud import user as user_crud
from app.schemas.auth import TokenRequest, TokenResponse
from app.schemas.user import UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(request: TokenRequest, db: Session = Depends(get_db)):
    """
    Authenticate a user and return a JWT.

    The token carries the username and admin flag and is sent back as
    `Authorization: Bearer <token>`.
    """
    user = user_crud.authenticate(db, request.username, request.password)
    return TokenResponse(token=create_token(user["username"], bool(user["is_admin"])))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new user account and return a JWT for immediate use.

    Self-registered users are never admins.
    """
    user = user_crud.register(db, {**request.model_dump(by_alias=True), "isAdmin": False})
    return TokenResponse(token=create_token(user["username"], False))
