from .article import ArticleModel, ArticlePropertyModel

__all__ = [
    "ArticleModel",
    "ArticlePropertyModel",
]
