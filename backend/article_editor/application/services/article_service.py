"""Application service (use case) for Article operations."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from article_editor.application.interfaces import ArticleRepository
from article_editor.application.schemas import ArticleCreate, ArticleUpdate, PropertyInput
from article_editor.domain.entities import Article, ArticleProperty
from article_editor.domain.exceptions import ArticleValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)


@contextmanager
def _store_operation(description: str) -> Iterator[None]:
    """Log store failures with context and re-raise them unchanged."""
    try:
        yield
    except EntityNotFoundError:
        raise
    except Exception:
        logger.exception("Article store failure while trying to %s", description)
        raise


def _require_title(title: str) -> None:
    if not title:
        raise ArticleValidationError("title", "Title is required")


def _to_properties(items: list[PropertyInput]) -> list[ArticleProperty]:
    return [
        ArticleProperty(property_name=p.property_name, property_value=p.property_value)
        for p in items
    ]


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article | None:
        """Return the article, or None when it does not exist."""
        with _store_operation(f"get article {article_id}"):
            return await self._repository.get_by_id(article_id)

    async def list_articles(self) -> list[Article]:
        with _store_operation("list articles"):
            return await self._repository.get_all()

    async def get_articles_by_ids(self, article_ids: list[int]) -> list[Article]:
        with _store_operation(f"get articles {article_ids}"):
            return await self._repository.get_by_ids(article_ids)

    async def create_article(self, data: ArticleCreate) -> Article:
        _require_title(data.title)
        with _store_operation("create article"):
            article = await self._repository.create(
                Article(title=data.title, content=data.content)
            )
            article.properties = []
            if data.properties:
                article.properties = await self._repository.add_properties(
                    article.id, _to_properties(data.properties)
                )
        logger.info(
            "Created article %d with %d properties", article.id, len(article.properties)
        )
        return article

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        """Apply a partial update.

        Raises EntityNotFoundError when the article does not exist.
        """
        provided = data.model_fields_set
        title = data.title if "title" in provided else None
        content = data.content if "content" in provided else None
        if title is not None:
            _require_title(title)

        with _store_operation(f"update article {article_id}"):
            article = await self._repository.update_fields(
                article_id, title=title, content=content
            )
            if "properties" in provided and data.properties is not None:
                await self._repository.replace_properties(
                    article_id, _to_properties(data.properties)
                )
            article.properties = await self._repository.get_properties(article_id)
        logger.info("Updated article %d", article_id)
        return article

    async def delete_article(self, article_id: int) -> bool:
        """Delete an article and its properties. False when nothing was deleted."""
        with _store_operation(f"delete article {article_id}"):
            deleted = await self._repository.delete(article_id)
        if deleted:
            logger.info("Deleted article %d", article_id)
        return deleted
