"""
FastAPI dependencies for authentication and authorization.

authenticate_jwt turns an optional bearer token into a RequestContext; the
ensure_* guards build on it and are attached to routes with Depends().
"""

import logging
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from pydantic import BaseModel, ValidationError
from typing import Any, Callable, Dict, Optional, Type

from app.core.exceptions import ForbiddenError, InvalidInputError, UnauthorizedError
from app.core.security import decode_token
from app.schemas.auth import Identity, RequestContext

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>, prefix case-insensitive).
# auto_error=False: a missing or malformed header yields None instead of a 403.
bearer_scheme = HTTPBearer(auto_error=False)


def authenticate_jwt(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> RequestContext:
    """
    Resolve the caller's identity from the Authorization header.

    It is not an error if no token was provided or if the token is invalid
    or expired: the request simply proceeds as anonymous.
    """
    if not credentials:
        return RequestContext()

    try:
        payload = decode_token(credentials.credentials.strip())
        identity = Identity.model_validate(payload)
    except (JWTError, ValidationError) as e:
        logger.debug(f"Ignoring unusable bearer token: {e}")
        return RequestContext()

    return RequestContext(identity=identity)


def ensure_logged_in(ctx: RequestContext = Depends(authenticate_jwt)) -> Identity:
    """
    Require a verified identity.

    Raises:
        UnauthorizedError: If the request is anonymous
    """
    if ctx.identity is None:
        raise UnauthorizedError()
    return ctx.identity


def ensure_admin(identity: Identity = Depends(ensure_logged_in)) -> Identity:
    """
    Require an admin identity.

    Anonymous callers fail closed with 401 through ensure_logged_in.

    Raises:
        ForbiddenError: If the identity is not an admin
    """
    if not identity.is_admin:
        logger.warning(f"Non-admin user {identity.username} denied admin route")
        raise ForbiddenError()
    return identity


def ensure_admin_or_self(
    username: str,
    identity: Identity = Depends(ensure_logged_in),
) -> Identity:
    """
    Require an admin identity or the owner of the `username` path parameter.

    Raises:
        ForbiddenError: If the caller is neither admin nor the target user
    """
    if identity.username == username or identity.is_admin:
        return identity
    logger.warning(f"User {identity.username} denied access to account {username}")
    raise ForbiddenError()


def format_validation_errors(error: ValidationError) -> str:
    """Flatten pydantic errors into one readable message."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'query'}: {err['msg']}"
        for err in error.errors()
    )


def query_filters(schema: Type[BaseModel]) -> Callable[[Request], Dict[str, Any]]:
    """
    Build a dependency that validates the query string against `schema`.

    Unknown keys or badly typed values raise InvalidInputError (400). The
    result is keyed by the camelCase filter names app.crud.sql understands.
    """
    def dependency(request: Request) -> Dict[str, Any]:
        try:
            params = schema.model_validate(dict(request.query_params))
        except ValidationError as e:
            raise InvalidInputError(format_validation_errors(e))
        return params.model_dump(by_alias=True, exclude_none=True)

    return dependency
