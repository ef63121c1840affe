"""
Domain errors raised by the data and auth layers.

Each error carries the HTTP status it maps to; main.py registers a single
handler that turns any AppError into a JSON response.
"""

from typing import Optional


class AppError(Exception):
    """Base application error."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(AppError):
    """Raised when a payload or filter is malformed or empty."""

    status_code = 400
    default_message = "Bad request"


class DuplicateError(InvalidInputError):
    """Raised when an equivalent row already exists."""

    default_message = "Duplicate record"


class UnauthorizedError(AppError):
    """Raised when no identity is attached to the request."""

    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    """Raised when the identity lacks the required privilege."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    """Raised when the referenced entity does not exist."""

    status_code = 404
    default_message = "Not found"


class InternalError(AppError):
    """Raised for unexpected failures, usually from the database layer."""
