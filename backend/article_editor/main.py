"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path
from urllib.parse import urlparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from article_editor.config import Settings, get_settings
from article_editor.infrastructure.database import Database
from article_editor.infrastructure.logging.log_config import setup_logging
from article_editor.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _postgres_target(database_url: str) -> tuple[str, str] | None:
    """Return ``(maintenance_url, db_name)`` for a PostgreSQL URL, else None."""
    if not database_url.startswith("postgresql"):
        return None
    url = database_url.replace("postgresql+asyncpg://", "postgresql://", 1)
    db_name = urlparse(url).path.lstrip("/")
    if not db_name:
        return None
    return url.rsplit("/", 1)[0] + "/postgres", db_name


async def _ensure_database_exists(database_url: str) -> None:
    """Create the PostgreSQL database on first start. Other backends are left alone.

    Failure only logs a warning: connecting afterwards reports the real problem.
    """
    target = _postgres_target(database_url)
    if target is None:
        return
    maintenance_url, db_name = target

    import asyncpg

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            if await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", db_name):
                logger.debug("Database '%s' already exists", db_name)
                return
            # CREATE DATABASE cannot run inside a transaction block
            await conn.execute(f'CREATE DATABASE "{db_name}"')
            logger.info("Created database '%s'", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the database, create tables, close on shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    await _ensure_database_exists(settings.database_url)

    database = Database(settings.database_url, echo=settings.database_echo)
    await database.connect()
    await database.create_all()
    app.state.database = database

    Path(settings.export_dir).mkdir(parents=True, exist_ok=True)
    logger.info("%s %s started", settings.app_title, settings.app_version)

    try:
        yield
    finally:
        await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    # Download URLs returned by the export endpoint point here
    app.mount(
        settings.export_url_prefix,
        StaticFiles(directory=settings.export_dir, check_dir=False),
        name="exports",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "article_editor.main:app",
        host="0.0.0.0",
        port=2022,
        reload=True,
    )
