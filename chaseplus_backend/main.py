"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, starlette, chaseplus_backend.api, chaseplus_backend.observability, chaseplus_backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from chaseplus_backend.api import api_router
from chaseplus_backend.api.deps.dependencies import get_service_cache
from chaseplus_backend.boundary.db.create_tables import create_tables
from chaseplus_backend.configs import get_settings
from chaseplus_backend.observability.logger import configure_logging
from chaseplus_backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    if settings.database.auto_create_tables:
        try:
            await create_tables()
        except Exception as e:
            logger.exception("Failed to create database tables", extra={"error": str(e)})
            raise
        logger.info("Database tables ensured")

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Course, blog and category management for the Chaseplus site",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Signed cookie session for the admin auth gate
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.auth.session_secret,
        max_age=settings.auth.session_max_age,
        https_only=settings.auth.https_only,
        same_site="lax",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routes
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chaseplus_backend.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
