from .article_service import ArticleService
from .export_service import ExportService

__all__ = [
    "ArticleService",
    "ExportService",
]
