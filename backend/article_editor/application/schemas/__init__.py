from .article import (
    MAX_ARTICLE_ID,
    ArticleId,
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    DeleteArticleResponse,
    PropertyInput,
    PropertyResponse,
)
from .export import ExportRequest, ExportResponse

__all__ = [
    "MAX_ARTICLE_ID",
    "ArticleId",
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "DeleteArticleResponse",
    "PropertyInput",
    "PropertyResponse",
    "ExportRequest",
    "ExportResponse",
]
