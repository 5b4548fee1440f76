"""Concrete ArticleRepository backed by raw, parameterized SQL on an async engine."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from article_manager.application.interfaces import ArticleRepository
from article_manager.domain.entities import Article
from article_manager.domain.exceptions import EntityNotFoundError, PersistenceError

logger = logging.getLogger(__name__)

_INSERT = text(
    """
    INSERT INTO articles (title, body, author)
    VALUES (:title, :body, :author)
    RETURNING id
    """
)
_SELECT_ALL = text("SELECT id, title, body, author FROM articles")
_SELECT_BY_ID = text("SELECT id, title, body, author FROM articles WHERE id = :id")
_UPDATE = text(
    """
    UPDATE articles
    SET title = :title, body = :body, author = :author
    WHERE id = :id
    """
)
_DELETE = text("DELETE FROM articles WHERE id = :id")


@contextmanager
def _persistence_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures as PersistenceError, chaining the original."""
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Article %s failed: %s", operation, exc)
        raise PersistenceError(operation, exc) from exc


class ArticleStore(ArticleRepository):
    """Implements the ArticleRepository port over the ``articles`` table.

    Holds only the engine; every call round-trips to the database. Writes run
    in their own transaction, committed on success and rolled back on error.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @staticmethod
    def _to_entity(row: Row) -> Article:
        """Map result row → domain entity."""
        return Article(
            id=row.id,
            title=row.title,
            body=row.body,
            author=row.author,
        )

    async def create(self, title: str, body: str, author: str) -> Article:
        with _persistence_errors("create"):
            async with self._engine.begin() as conn:
                result = await conn.execute(
                    _INSERT, {"title": title, "body": body, "author": author}
                )
                inserted_id = result.scalar_one()
        logger.debug("Created article %s", inserted_id)
        return Article(id=inserted_id, title=title, body=body, author=author)

    async def get_all(self) -> list[Article]:
        with _persistence_errors("get_all"):
            async with self._engine.connect() as conn:
                result = await conn.execute(_SELECT_ALL)
                articles = [self._to_entity(row) for row in result]
        logger.debug("Fetched %d articles", len(articles))
        return articles

    async def get_by_id(self, article_id: int) -> Article:
        with _persistence_errors("get_by_id"):
            async with self._engine.connect() as conn:
                result = await conn.execute(_SELECT_BY_ID, {"id": article_id})
                row = result.one_or_none()
        if row is None:
            raise EntityNotFoundError("Article", article_id)
        return self._to_entity(row)

    async def update(self, article: Article) -> Article:
        with _persistence_errors("update"):
            async with self._engine.begin() as conn:
                result = await conn.execute(
                    _UPDATE,
                    {
                        "id": article.id,
                        "title": article.title,
                        "body": article.body,
                        "author": article.author,
                    },
                )
                count = result.rowcount
        if count == 0:
            raise EntityNotFoundError("Article", article.id, "No row updated")
        logger.debug("Updated article %s", article.id)
        return article

    async def delete(self, article_id: int) -> None:
        # No affected-row check here: deleting a missing id is a no-op.
        with _persistence_errors("delete"):
            async with self._engine.begin() as conn:
                await conn.execute(_DELETE, {"id": article_id})
        logger.debug("Deleted article %s", article_id)

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        await self._engine.dispose()

    async def __aenter__(self) -> "ArticleStore":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
