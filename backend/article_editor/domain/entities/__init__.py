from .article import Article, ArticleProperty
from .export import ExportFormat, ExportResult

__all__ = [
    "Article",
    "ArticleProperty",
    "ExportFormat",
    "ExportResult",
]
