"""
FastAPI Main Application - ChatShare API entry point.

Run with: uvicorn chatshare.interfaces.api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatshare import __version__
from chatshare.config import get_settings

from .deps import cleanup_services, init_services
from .middleware import RequestContextMiddleware, register_error_handlers
from .routes import health, login, share

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting ChatShare API...")
    logger.info("  Object store: %s", settings.db_path)
    logger.info("  App URL: %s", settings.app_url)
    if settings.jwt_secret_generated:
        logger.warning(
            "JWT_SECRET not set - signing with a temporary secret; "
            "sessions will not survive a restart"
        )

    await init_services()
    logger.info("  Services initialized")

    yield

    logger.info("Shutting down ChatShare API...")
    await cleanup_services()


def create_app() -> FastAPI:
    """Create FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="ChatShare API",
        description="GitHub login, session cookies and chat sharing",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    register_error_handlers(app)

    # First added = innermost; CORS wraps the request context
    app.add_middleware(RequestContextMiddleware)

    # Credentials are needed for the session cookies
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(login.router, prefix="/api/login", tags=["Login"])
    app.include_router(share.router, prefix="/api/share", tags=["Share"])

    return app


# Create app instance
app = create_app()
