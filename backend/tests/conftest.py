"""
Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database seeded with
companies c1..c3 and jobs j1..j3 (ids 1..3).
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from jobly.auth.jwt import create_access_token
from jobly.db.session import create_db_engine, init_db, make_session_factory
from jobly.db.store import Store
from jobly.main import create_app
from jobly.services.company_service import CompanyService
from jobly.services.job_service import JobService


SEED_COMPANIES = [
    {"handle": "c1", "name": "C1", "description": "Desc1", "num_employees": 1, "logo_url": "http://c1.img"},
    {"handle": "c2", "name": "C2", "description": "Desc2", "num_employees": 2, "logo_url": "http://c2.img"},
    {"handle": "c3", "name": "C3", "description": "Desc3", "num_employees": 3, "logo_url": "http://c3.img"},
]

SEED_JOBS = [
    {"title": "j1", "salary": 100000, "equity": 0, "company_handle": "c1"},
    {"title": "j2", "salary": 80000, "equity": 0.2, "company_handle": "c1"},
    {"title": "j3", "salary": 40000, "equity": 0, "company_handle": "c2"},
]


@pytest.fixture
def engine():
    """Fresh in-memory database with the seed rows."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO companies (handle, name, description, num_employees, logo_url) "
                "VALUES (:handle, :name, :description, :num_employees, :logo_url)"
            ),
            SEED_COMPANIES,
        )
        for job in SEED_JOBS:
            conn.execute(
                text(
                    "INSERT INTO jobs (title, salary, equity, company_handle) "
                    "VALUES (:title, :salary, :equity, :company_handle)"
                ),
                job,
            )
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = make_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def store(db_session) -> Store:
    return Store(db_session)


@pytest.fixture
def company_service(store) -> CompanyService:
    return CompanyService(store)


@pytest.fixture
def job_service(store) -> JobService:
    return JobService(store)


@pytest.fixture
def client(engine):
    app = create_app(engine, create_tables=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers() -> dict:
    token = create_access_token(subject="u4", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers() -> dict:
    token = create_access_token(subject="u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}
