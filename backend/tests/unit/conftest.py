"""Shared fakes and fixtures for the unit tests."""

import copy
from collections.abc import Sequence

import pytest

from article_editor.application.interfaces import ArticleRepository
from article_editor.application.services import ArticleService
from article_editor.domain.entities import Article, ArticleProperty
from article_editor.domain.exceptions import EntityNotFoundError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing.

    Hands out copies so callers cannot mutate stored state behind its back.
    """

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self._next_property_id = 1

    def _stored(self, article_id: int) -> Article:
        article = self._articles.get(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    def _stamp(self, article_id: int, prop: ArticleProperty) -> ArticleProperty:
        stamped = ArticleProperty(
            id=self._next_property_id,
            article_id=article_id,
            property_name=prop.property_name,
            property_value=prop.property_value,
        )
        self._next_property_id += 1
        return stamped

    async def get_by_id(self, article_id: int) -> Article | None:
        article = self._articles.get(article_id)
        return copy.deepcopy(article) if article else None

    async def get_all(self) -> list[Article]:
        return [copy.deepcopy(a) for _, a in sorted(self._articles.items())]

    async def get_by_ids(self, article_ids: Sequence[int]) -> list[Article]:
        return [
            copy.deepcopy(self._articles[i])
            for i in sorted(set(article_ids))
            if i in self._articles
        ]

    async def get_properties(self, article_id: int) -> list[ArticleProperty]:
        article = self._articles.get(article_id)
        return copy.deepcopy(article.properties) if article else []

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        article.properties = []
        self._articles[article.id] = copy.deepcopy(article)
        return article

    async def add_properties(
        self, article_id: int, properties: Sequence[ArticleProperty]
    ) -> list[ArticleProperty]:
        stored = self._stored(article_id)
        added = [self._stamp(article_id, p) for p in properties]
        stored.properties.extend(added)
        return copy.deepcopy(added)

    async def update_fields(
        self,
        article_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Article:
        stored = self._stored(article_id)
        stored.update(title=title, content=content)
        return copy.deepcopy(stored)

    async def replace_properties(
        self, article_id: int, properties: Sequence[ArticleProperty]
    ) -> list[ArticleProperty]:
        stored = self._stored(article_id)
        stored.properties = [self._stamp(article_id, p) for p in properties]
        return copy.deepcopy(stored.properties)

    async def delete(self, article_id: int) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)
