"""Health check endpoint."""
from __future__ import annotations
from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Basic health check, echoing the configured default locale."""
    return {
        "status": "ok",
        "service": "date-entry-api",
        "default_locale": request.app.state.settings.default_locale,
    }
