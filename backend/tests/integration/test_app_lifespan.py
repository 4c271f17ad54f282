"""Tests for the application lifespan: open the database on startup, close it on shutdown."""

from pathlib import Path

import pytest

from article_editor.config import Settings
from article_editor.infrastructure.database import ArticleModel
from article_editor.main import create_app


@pytest.mark.asyncio
async def test_lifespan_opens_and_disposes_database(settings: Settings):
    app = create_app(settings)

    async with app.router.lifespan_context(app):
        database = app.state.database
        assert Path(settings.export_dir).is_dir()
        async with database.session() as session:
            session.add(ArticleModel(title="Created during startup", content=""))

    with pytest.raises(RuntimeError, match="not connected"):
        database.engine

    # Tables survive a restart
    restarted = create_app(settings)
    async with restarted.router.lifespan_context(restarted):
        async with restarted.state.database.session() as session:
            assert await session.get(ArticleModel, 1) is not None
