"""
FastAPI app assembly: lifecycle, middleware, error handlers and router wiring.

`create_app()` builds the engine and session factory on startup (in dependency
order) and disposes the engine on shutdown when the app created it.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

from user_api.db.database import build_engine, build_session_factory, init_schema
from user_api.api.users import router as users_router
from user_api.utils.feature_flags import auto_create_schema_enabled

DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]


def _cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


async def handle_database_error(request: Request, exc: SQLAlchemyError):
    logger.exception("database_error: %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        {"detail": "Database error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the application.

    When ``engine`` is supplied the caller owns it and it is not disposed on
    shutdown; otherwise one is built from the environment at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)
        owns_engine = engine is None
        db_engine = build_engine() if owns_engine else engine
        if auto_create_schema_enabled():
            init_schema(db_engine)
        app.state.engine = db_engine
        app.state.session_factory = build_session_factory(db_engine)
        try:
            yield
        finally:
            if owns_engine:
                db_engine.dispose()
            logger.info("app_shutdown")

    app = FastAPI(
        title="User API",
        description="API for creating and listing users.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Avoid implicit trailing-slash redirects for predictable URLs
    app.router.redirect_slashes = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.include_router(users_router)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": "user-service"}

    return app


app = create_app()
