"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from article_editor.config import Settings
from article_editor.application.services import ArticleService, ExportService
from article_editor.infrastructure.database.session import get_db_session
from article_editor.infrastructure.database.repositories import SQLAlchemyArticleRepository
from article_editor.infrastructure.storage.local_export_storage import LocalExportStorage


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


def get_export_storage(settings: Settings = Depends(get_app_settings)) -> LocalExportStorage:
    """Provides the local export storage configured from settings."""
    return LocalExportStorage(
        export_dir=settings.export_dir,
        url_prefix=settings.export_url_prefix,
    )


async def get_export_service(
    article_service: ArticleService = Depends(get_article_service),
    storage: LocalExportStorage = Depends(get_export_storage),
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[ExportService, None]:
    """Provides an ExportService reading through the request's ArticleService."""
    yield ExportService(
        article_service=article_service,
        storage=storage,
        document_title=settings.export_document_title,
    )
