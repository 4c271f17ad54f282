"""Health check endpoint — no database access, always available."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from article_editor.config import Settings
from article_editor.infrastructure.dependencies import get_app_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict:
    """Returns the current application health status."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
