"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern. Statements are parameterized SQL built with
app.crud.sql.
"""

from app.crud import company, job, user

__all__ = ["company", "job", "user"]
