"""Top-level API router — mounts every endpoint group under ``/api/v1``."""

from fastapi import APIRouter

from article_editor.presentation.api.v1.endpoints.articles import router as articles_router
from article_editor.presentation.api.v1.endpoints.health import router as health_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(articles_router)
