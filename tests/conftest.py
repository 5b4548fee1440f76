"""Shared fixtures for the article store test suite.

Integration tests run the real store against a throwaway SQLite file through
aiosqlite, so no PostgreSQL server is needed. The store never creates its own
schema, so the fixture issues the DDL itself.
"""

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from sqlalchemy import text

from article_manager import ArticleStore, connect
from article_manager.config import get_settings

ARTICLES_DDL = """
CREATE TABLE articles (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    body TEXT NOT NULL,
    author TEXT NOT NULL
)
"""


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def articles_ddl() -> str:
    return ARTICLES_DDL


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'articles.db'}"


@pytest_asyncio.fixture
async def store(sqlite_url: str) -> AsyncIterator[ArticleStore]:
    article_store = await connect(sqlite_url)
    async with article_store.engine.begin() as conn:
        await conn.execute(text(ARTICLES_DDL))
    yield article_store
    await article_store.close()
