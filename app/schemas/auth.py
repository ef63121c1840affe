"""
Pydantic schemas for token issuance and per-request identity.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Identity(BaseModel):
    """Verified claims taken from a bearer token."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    is_admin: bool = Field(False, alias="isAdmin")


class RequestContext(BaseModel):
    """Immutable per-request auth state. identity is None for anonymous callers."""
    model_config = ConfigDict(frozen=True)

    identity: Optional[Identity] = None


class TokenRequest(BaseModel):
    """Request schema for POST /auth/token."""
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str
