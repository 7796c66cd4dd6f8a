"""
Database engine and session management.

Resolves the database URL from environment configuration (with an in-memory
SQLite fallback under pytest) and builds engines and session factories. Nothing
connects at import time: the application creates its engine during startup and
disposes it on shutdown.
"""
import logging
import os
import sys
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from user_api.db import models

logger = logging.getLogger(__name__)

MEMORY_SQLITE_URL = "sqlite+pysqlite:///:memory:"
LOCAL_SQLITE_URL = "sqlite:///./users.db"

_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


def _get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    components = {name: os.getenv(name) for name in _POSTGRES_VARS}
    # Nothing configured at all: local development database file
    if not any(components.values()):
        return LOCAL_SQLITE_URL

    missing = [name for name, value in components.items() if not value]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{components['POSTGRES_USER']}:{components['POSTGRES_PASSWORD']}"
        f"@{components['POSTGRES_HOST']}:{components['POSTGRES_PORT']}/{components['POSTGRES_DB']}"
    )


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so also look for the
    pytest package in ``sys.modules`` (true once collection starts).
    ``PYTEST_RUNNING=1`` forces detection.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    if "pytest" in sys.modules:
        return True
    return False


def resolve_database_url() -> str:
    """Pick the URL the application should connect to.

    Order: ``USER_API_TEST_DB``, then in-memory SQLite under pytest, then the
    regular environment configuration.
    """
    explicit_test_db = os.getenv("USER_API_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    if _is_pytest_runtime():
        return MEMORY_SQLITE_URL
    return _get_database_url()


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    if ":memory:" in url:
        # StaticPool so every session shares the one in-memory database
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {"connect_args": {"check_same_thread": False}}


def build_engine(url: str | None = None) -> Engine:
    url = url or resolve_database_url()
    engine = create_engine(url, **_engine_kwargs(url))
    logger.info("database_engine_created: backend=%s", engine.url.get_backend_name())
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_schema(engine: Engine) -> None:
    """Create missing tables from ORM metadata; existing tables are left alone."""
    models.Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Dependency to get a database session from the app's session factory."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
