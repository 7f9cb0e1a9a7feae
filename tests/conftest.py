"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- Seed data (companies, jobs, users)
- FastAPI test client
- User and admin tokens
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.core.database import Base, get_db
from jobly.core.security import create_token_for, get_password_hash
from jobly.crud import job as job_crud
from jobly.models import Company, User
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
def _enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked; the jobs -> companies FK matters here."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def companies(db_session):
    """Companies c1..c3"""
    db_session.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])
    db_session.commit()
    return ["c1", "c2", "c3"]


@pytest.fixture
def job_ids(db_session, companies):
    """
    Jobs j1..j4, returned as a list of ids in title order.

    j1/j2 have equity, j3 has zero equity, j4 has none.
    """
    jobs = [
        job_crud.create(db_session, company_handle="c1", title="j1", salary=10000, equity="0.1"),
        job_crud.create(db_session, company_handle="c1", title="j2", salary=20000, equity="0.2"),
        job_crud.create(db_session, company_handle="c2", title="j3", salary=30000, equity="0"),
        job_crud.create(db_session, company_handle="c2", title="j4", salary=40000, equity=None),
    ]
    return [job["id"] for job in jobs]


@pytest.fixture
def users(db_session):
    """Regular user u1 and admin user 'admin', both with password 'password1'"""
    hashed = get_password_hash("password1")
    db_session.add_all([
        User(username="u1", password=hashed, first_name="U1F", last_name="U1L",
             email="user1@user.com", is_admin=False),
        User(username="admin", password=hashed, first_name="AdF", last_name="AdL",
             email="admin@user.com", is_admin=True),
    ])
    db_session.commit()
    return ["admin", "u1"]


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

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def u1_headers():
    return {"Authorization": f"Bearer {create_token_for('u1', is_admin=False)}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_token_for('admin', is_admin=True)}"}
