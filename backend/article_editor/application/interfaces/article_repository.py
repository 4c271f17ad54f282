"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from article_editor.domain.entities import Article, ArticleProperty


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Articles returned by this port always carry their complete, current
    property list (in insertion order).
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, ordered by ID ascending."""
        ...

    @abstractmethod
    async def get_by_ids(self, article_ids: Sequence[int]) -> list[Article]:
        """Retrieve the articles matching the given IDs. Unknown IDs are skipped."""
        ...

    @abstractmethod
    async def get_properties(self, article_id: int) -> list[ArticleProperty]:
        """Retrieve the properties currently stored for an article."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article (without properties) and return it with the generated ID."""
        ...

    @abstractmethod
    async def add_properties(
        self, article_id: int, properties: Sequence[ArticleProperty]
    ) -> list[ArticleProperty]:
        """Append properties to an article, preserving order. Names may repeat."""
        ...

    @abstractmethod
    async def update_fields(
        self,
        article_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Article:
        """Change only the supplied fields and refresh updated_at.

        Raises EntityNotFoundError when no article has this ID.
        """
        ...

    @abstractmethod
    async def replace_properties(
        self, article_id: int, properties: Sequence[ArticleProperty]
    ) -> list[ArticleProperty]:
        """Delete all properties of an article and insert the replacement set."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article and its properties. Returns True if deleted, False if not found."""
        ...
