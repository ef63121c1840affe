"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies, jobs and users
- FastAPI test client
- Tokens for a regular user and an admin
"""

import os

# Cheap bcrypt rounds for tests; must be set before app.core.security is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db, run_query
from app.core.security import create_token, get_password_hash
from app.models import Company, Job, User  # noqa: F401  register tables on Base.metadata
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def seed(db):
    """Three companies, three jobs and two users (u1 regular, admin)."""
    run_query(db, """
        INSERT INTO companies (handle, name, num_employees, description, logo_url)
        VALUES ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
               ('c2', 'C2', 2, 'Desc2', 'http://c2.img'),
               ('c3', 'C3', 3, 'Desc3', 'http://c3.img')""")

    run_query(db, """
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ('test job', 100000, 0.05, 'c1'),
               ('test job2', 80000, NULL, 'c2'),
               ('cat wrangler', 150000, 0.75, 'c3')""")

    run_query(
        db,
        """INSERT INTO users (username, password, first_name, last_name, email, is_admin)
           VALUES ('u1', $1, 'U1F', 'U1L', 'u1@email.com', $3),
                  ('admin', $2, 'AdF', 'AdL', 'admin@email.com', $4)""",
        [get_password_hash("password1"), get_password_hash("password2"), False, True],
    )
    db.commit()


@pytest.fixture
def db_session():
    """
    Create a freshly seeded database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    # No `with`: the lifespan hook would initialize the production database
    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def u1_token():
    return create_token("u1", False)


@pytest.fixture
def admin_token():
    return create_token("admin", True)


@pytest.fixture
def u1_headers(u1_token):
    return {"Authorization": f"Bearer {u1_token}"}


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def job_id(db_session):
    """ID of the seeded 'cat wrangler' job."""
    return run_query(db_session, "SELECT id FROM jobs WHERE title = $1", ["cat wrangler"]).scalar_one()


@pytest.fixture
def sample_job_data():
    """Job payload as sent by API clients."""
    return {
        "title": "developer",
        "salary": 80000,
        "equity": 0.05,
        "companyHandle": "c1",
    }
