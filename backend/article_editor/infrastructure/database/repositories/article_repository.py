"""Concrete repository implementation backed by SQLAlchemy."""

from collections.abc import Sequence
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from article_editor.application.interfaces import ArticleRepository
from article_editor.domain.entities import Article, ArticleProperty
from article_editor.domain.exceptions import EntityNotFoundError
from article_editor.infrastructure.database.models import ArticleModel, ArticlePropertyModel


def _aware(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Properties are loaded with the article (``selectin``) and kept in
    insertion order. Deleting an article removes its properties through the
    ORM cascade and the ``ON DELETE CASCADE`` foreign key.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _property_to_entity(self, model: ArticlePropertyModel) -> ArticleProperty:
        return ArticleProperty(
            id=model.id,
            article_id=model.article_id,
            property_name=model.property_name,
            property_value=model.property_value,
            created_at=_aware(model.created_at),
        )

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            properties=[self._property_to_entity(p) for p in model.properties],
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            properties=[],
        )

    def _property_to_model(self, article_id: int, entity: ArticleProperty) -> ArticlePropertyModel:
        return ArticlePropertyModel(
            article_id=article_id,
            property_name=entity.property_name,
            property_value=entity.property_value,
        )

    async def _get_model(self, article_id: int) -> ArticleModel:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            raise EntityNotFoundError("Article", article_id)
        return model

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_ids(self, article_ids: Sequence[int]) -> list[Article]:
        if not article_ids:
            return []
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.id.in_(list(article_ids)))
            .order_by(ArticleModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_properties(self, article_id: int) -> list[ArticleProperty]:
        stmt = (
            select(ArticlePropertyModel)
            .where(ArticlePropertyModel.article_id == article_id)
            .order_by(ArticlePropertyModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._property_to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def add_properties(
        self, article_id: int, properties: Sequence[ArticleProperty]
    ) -> list[ArticleProperty]:
        model = await self._get_model(article_id)
        added = [self._property_to_model(article_id, p) for p in properties]
        model.properties.extend(added)
        await self._session.flush()
        return [self._property_to_entity(p) for p in added]

    async def update_fields(
        self,
        article_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Article:
        model = await self._get_model(article_id)
        article = self._to_entity(model)
        article.update(title=title, content=content)
        model.title = article.title
        model.content = article.content
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def replace_properties(
        self, article_id: int, properties: Sequence[ArticleProperty]
    ) -> list[ArticleProperty]:
        model = await self._get_model(article_id)
        replacement = [self._property_to_model(article_id, p) for p in properties]
        # delete-orphan removes the previous rows in the same flush
        model.properties = replacement
        await self._session.flush()
        return [self._property_to_entity(p) for p in replacement]

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
