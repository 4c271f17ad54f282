"""SQLAlchemy ORM models for the Article entity and its properties."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from article_editor.infrastructure.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    # HTML from the rich-text editor
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
    )

    properties: Mapped[list["ArticlePropertyModel"]] = relationship(
        back_populates="article",
        cascade="all, delete-orphan",
        order_by="ArticlePropertyModel.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}')>"


class ArticlePropertyModel(Base):
    """ORM model — maps to the 'article_properties' table. Names are not unique."""

    __tablename__ = "article_properties"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    property_name: Mapped[str] = mapped_column(Text, nullable=False)
    property_value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
    )

    article: Mapped[ArticleModel] = relationship(back_populates="properties")

    def __repr__(self) -> str:
        return (
            f"<ArticlePropertyModel(id={self.id}, article_id={self.article_id}, "
            f"name='{self.property_name}')>"
        )
