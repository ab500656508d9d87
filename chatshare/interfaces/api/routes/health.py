"""
Health Routes - Liveness and service description.
"""

from typing import Any

from fastapi import APIRouter, Depends

from chatshare import __version__
from chatshare.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy", "version": __version__}


@router.get("/api")
async def api_info(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Describe the login and sharing endpoints and the active share limits."""
    return {
        "name": "ChatShare API",
        "version": __version__,
        "login": "/api/login",
        "share": "/api/share/{user}/{id}",
        "limits": {
            "total": settings.share_total_limit,
            "per_window": settings.share_daily_limit,
            "window_hours": settings.share_window_hours,
        },
    }
