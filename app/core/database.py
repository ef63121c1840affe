import re
from typing import Any, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import CursorResult
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from app.core.config import settings

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,  # Connection pool size
    max_overflow=20  # Allow up to 20 connections beyond pool_size
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

# Positional placeholders ($1, $2, ...) as produced by app.crud.sql
_PLACEHOLDER = re.compile(r"\$(\d+)")


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> CursorResult:
    """
    Execute a statement written with positional ``$n`` placeholders.

    Each ``$n`` becomes the named bind ``:pn`` and is bound to ``values[n - 1]``,
    so user input never ends up in the SQL text itself.

    SQLite (used by the test suite) has no ILIKE; its LIKE is already
    case-insensitive for ASCII, so the operator is swapped there.
    """
    statement = _PLACEHOLDER.sub(r":p\1", sql)
    if db.get_bind().dialect.name == "sqlite":
        statement = statement.replace(" ILIKE ", " LIKE ")
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return db.execute(text(statement), params)


def init_db():
    """
    Initialize database.

    Imports the models so they register on Base.metadata, then creates any
    missing tables.
    """
    from app.models import company, job, user  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=engine)
