"""Pydantic DTOs for the export feature."""

from pydantic import BaseModel, Field

from article_editor.application.schemas.article import ArticleId
from article_editor.domain.entities import ExportFormat


class ExportRequest(BaseModel):
    """Export all articles, or only ``article_ids`` when given."""

    format: ExportFormat = Field(..., examples=["html"])
    article_ids: list[ArticleId] | None = Field(
        None, description="Articles to export; omit to export every article"
    )


class ExportResponse(BaseModel):
    success: bool
    download_url: str | None = None
    article_count: int = 0
    missing_ids: list[int] = Field(default_factory=list)

    model_config = {"from_attributes": True}
