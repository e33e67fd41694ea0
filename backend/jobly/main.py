# jobly/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from jobly.core.config import settings
from jobly.core.logging_config import configure_logging
from jobly.db.session import create_db_engine, init_db, make_session_factory
from jobly.middleware.request_logging import RequestLoggingMiddleware
from jobly.routers.health import router as health_router
from jobly.routers.companies import router as companies_router
from jobly.routers.jobs import router as jobs_router
from jobly.routers.auth import router as auth_router
from jobly.core.exception_handlers import (
    app_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from jobly.core import AppError


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app(engine: Engine | None = None, *, create_tables: bool = True) -> FastAPI:
    """
    Build the API. The engine is acquired here (or injected, e.g. by tests)
    and disposed when the app shuts down; nothing holds a module-level connection.
    """
    owns_engine = engine is None
    if engine is None:
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_tables:
            init_db(engine)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://jobly.example.com"
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS) or ["http://localhost:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(companies_router)
    app.include_router(jobs_router)

    return app


def build_app() -> FastAPI:
    """Entry point for `uvicorn --factory jobly.main:build_app`."""
    configure_logging()
    return create_app()
