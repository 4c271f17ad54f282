"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ArticleProperty:
    """A custom key/value pair attached to an article.

    Names are not unique: the same name may appear several times on one article.
    """

    property_name: str
    property_value: str = ""
    article_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class Article:
    """Core domain entity representing a rich-text article and its properties."""

    title: str
    content: str = ""
    id: int | None = None
    properties: list[ArticleProperty] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def update(self, title: str | None = None, content: str | None = None) -> None:
        """Update article fields and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        self.touch()

    def touch(self) -> None:
        """Move updated_at forward, strictly past its previous value."""
        now = _utcnow()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now
