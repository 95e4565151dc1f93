"""FastAPI application factory."""
from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ..config import Settings
from ..utils.logging import setup_logging
from .middleware import RequestLoggingMiddleware
from .routes import calendar, dates, health, status


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    setup_logging(settings.log_level)

    app = FastAPI(
        title="Date Entry API",
        description="Locale-aware date formatting, parsing and calendar grids",
        version="0.1.0",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware, default_locale=settings.default_locale)

    # Store settings in app state
    app.state.settings = settings

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(dates.router, tags=["dates"])
    app.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
    app.include_router(status.router, prefix="/status", tags=["status"])

    return app
