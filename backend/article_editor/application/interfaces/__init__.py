from .article_repository import ArticleRepository
from .export_storage import ExportStorage, StoredExport

__all__ = [
    "ArticleRepository",
    "ExportStorage",
    "StoredExport",
]
