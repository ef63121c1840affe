"""
Pydantic schemas for user registration and management.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.schemas.job import CamelModel


class UserRegisterRequest(CamelModel):
    """Request schema for self-registration (never admin)."""
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """Request schema for admin-created users, who may be admins."""
    is_admin: bool = False


class UserUpdateRequest(CamelModel):
    """Partial user update. Username and admin flag cannot be changed here."""
    model_config = ConfigDict(extra="forbid")

    password: Optional[str] = Field(None, min_length=5, max_length=72)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None

    @field_validator("password", "first_name", "last_name", "email")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class UserResponse(CamelModel):
    """User profile response (no password)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserEnvelope(BaseModel):
    user: UserResponse


class UserCreatedEnvelope(BaseModel):
    user: UserResponse
    token: str


class UserListEnvelope(BaseModel):
    users: List[UserResponse]
