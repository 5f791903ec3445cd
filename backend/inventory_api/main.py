from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from inventory_api.api import api_router
from inventory_api.core.config import Settings, settings
from inventory_api.core.logging_config import configure_logging
from inventory_api.core.rate_limit import FixedWindowRateLimiter, add_rate_limiting
from inventory_api.db.init_db import init_db
from inventory_api.db.session import Database

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not app_settings.DATABASE_URL:
            logger.error("DATABASE_URL is not set. Please check your environment variables and configuration.")
            app.state.db = None
        else:
            logger.info(f"Attempting to connect to database: {app_settings.masked_database_url()}")
            app.state.db = Database(app_settings.DATABASE_URL, echo=app_settings.SQL_ECHO)
            if app_settings.AUTO_CREATE_TABLES:
                await init_db(app.state.db)
        try:
            yield
        finally:
            if app.state.db is not None:
                await app.state.db.dispose()
            app.state.db = None

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        openapi_url=f"{app_settings.API_PREFIX}/openapi.json",
        version=app_settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.db = None

    if app_settings.RATE_LIMIT_ENABLED:
        app.state.rate_limiter = FixedWindowRateLimiter(
            max_requests=app_settings.RATE_LIMIT_MAX_REQUESTS,
            window_seconds=app_settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        add_rate_limiting(app, app.state.rate_limiter)

    # Added last so it wraps the limiter and 429 answers carry CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.error(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "Request conflicts with the stored data."},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Database error"},
        )

    # Include the main API router
    app.include_router(api_router, prefix=app_settings.API_PREFIX)

    @app.get("/")
    async def read_root():
        return {"message": f"Welcome to {app_settings.PROJECT_NAME}!"}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health check endpoint.
        """
        return {"status": "ok", "message": f"{app_settings.PROJECT_NAME} is healthy!"}

    return app


app = create_app()
