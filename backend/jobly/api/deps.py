from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from jobly.db.store import Store
from jobly.services.company_service import CompanyService
from jobly.services.job_service import JobService

def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Yields a DB session per request from the app-owned session factory.
    Ensures the session is closed even on exceptions.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> Store:
    return Store(db)


def get_company_service(store: Store = Depends(get_store)) -> CompanyService:
    return CompanyService(store=store)


def get_job_service(store: Store = Depends(get_store)) -> JobService:
    return JobService(store=store)
