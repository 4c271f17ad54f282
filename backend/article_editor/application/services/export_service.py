"""Export service — resolves articles, renders the document and stores it.

Pipeline: Resolve → Render → Store → Done

An empty selection (no articles at all, or none of the requested IDs exist)
is a soft failure: ``ExportResult(success=False)`` and nothing is written.
"""

import logging
from datetime import datetime, timezone

from article_editor.application.interfaces import ExportStorage
from article_editor.application.schemas import ExportRequest
from article_editor.application.services.article_service import ArticleService
from article_editor.application.services.export_renderer import (
    DEFAULT_DOCUMENT_TITLE,
    render_export_document,
)
from article_editor.domain.entities import Article, ExportResult
from article_editor.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("ExportService")


class ExportService:
    """Application service that orchestrates article export."""

    def __init__(
        self,
        article_service: ArticleService,
        storage: ExportStorage,
        document_title: str = DEFAULT_DOCUMENT_TITLE,
    ):
        self._articles = article_service
        self._storage = storage
        self._document_title = document_title

    async def export_articles(self, request: ExportRequest) -> ExportResult:
        plog.separator(f"Export ({request.format.value})")

        with plog.timed_step(PipelineStage.RESOLVE, "Resolving articles"):
            articles, missing_ids = await self._resolve(request.article_ids)

        if missing_ids:
            plog.detail("Requested articles not found", missing_ids=missing_ids)
        if not articles:
            plog.step_warning(PipelineStage.PIPELINE, "Nothing to export — no articles resolved")
            return ExportResult(success=False, missing_ids=missing_ids)

        with plog.timed_step(PipelineStage.RENDER, "Rendering document", articles=len(articles)):
            document = render_export_document(
                articles,
                export_format=request.format,
                generated_at=datetime.now(timezone.utc),
                document_title=self._document_title,
            )

        with plog.timed_step(PipelineStage.STORE, "Writing export file"):
            stored = await self._storage.store_export(document, request.format)

        plog.step_complete(
            PipelineStage.COMPLETE,
            f"Exported {len(articles)} article(s)",
            file=stored.filename,
            size_bytes=stored.size_bytes,
        )
        return ExportResult(
            success=True,
            download_url=stored.download_url,
            article_count=len(articles),
            missing_ids=missing_ids,
        )

    async def _resolve(self, article_ids: list[int] | None) -> tuple[list[Article], list[int]]:
        """Return the articles to export plus the requested IDs that did not match.

        Explicit IDs keep the requested order; repeated IDs are exported once.
        """
        if article_ids is None:
            return await self._articles.list_articles(), []

        requested = list(dict.fromkeys(article_ids))
        found = {a.id: a for a in await self._articles.get_articles_by_ids(requested)}
        articles = [found[i] for i in requested if i in found]
        missing = [i for i in requested if i not in found]
        return articles, missing
