"""Fixtures backed by a throwaway SQLite database (aiosqlite)."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from article_editor.config import Settings
from article_editor.infrastructure.database import Database
from article_editor.main import create_app


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    db = Database(f"sqlite:///{tmp_path / 'articles.db'}")
    await db.connect()
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'articles.db'}",
        export_dir=str(tmp_path / "exports"),
        export_url_prefix="/exports",
    )


@pytest_asyncio.fixture
async def client(settings: Settings, database: Database) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app; the lifespan is skipped, the test database is injected."""
    app = create_app(settings)
    app.state.database = database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
