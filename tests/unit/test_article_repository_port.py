"""Unit tests for the ArticleRepository port and the Article entity."""

import pytest

from article_manager.application.interfaces import ArticleRepository
from article_manager.domain.entities import Article
from article_manager.domain.exceptions import EntityNotFoundError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def create(self, title: str, body: str, author: str) -> Article:
        article = Article(id=self._next_id, title=title, body=body, author=author)
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def get_all(self) -> list[Article]:
        return list(self._articles.values())

    async def get_by_id(self, article_id: int) -> Article:
        if article_id not in self._articles:
            raise EntityNotFoundError("Article", article_id)
        return self._articles[article_id]

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise EntityNotFoundError("Article", article.id, "No row updated")
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> None:
        self._articles.pop(article_id, None)


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


def test_port_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ArticleRepository()


def test_new_article_has_no_id():
    article = Article(title="T", body="B", author="A")
    assert article.id is None
    assert article == Article("T", "B", "A")


@pytest.mark.asyncio
async def test_fake_follows_update_delete_contract(repository: FakeArticleRepository):
    created = await repository.create("T", "B", "A")

    with pytest.raises(EntityNotFoundError, match="No row updated"):
        await repository.update(Article(id=99, title="T", body="B", author="A"))

    await repository.delete(99)
    assert await repository.get_all() == [created]
