"""SQLAlchemy async engine setup and the ``connect`` entry point."""

import asyncio
import logging

from sqlalchemy import make_url, text
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from article_manager.config import get_settings
from article_manager.domain.exceptions import DatabaseConnectionError
from article_manager.infrastructure.database.repositories import ArticleStore

logger = logging.getLogger(__name__)

# Missing DBAPI modules surface as ImportError; asyncio.TimeoutError is not an
# OSError before Python 3.11.
_CONNECT_ERRORS = (SQLAlchemyError, OSError, ValueError, ImportError, asyncio.TimeoutError)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def _redact(dsn: str) -> str:
    """Mask the password of a parseable URL; unparseable strings pass through."""
    try:
        return make_url(dsn).render_as_string(hide_password=True)
    except (ArgumentError, ValueError):
        return dsn


async def connect(connection_string: str | None = None) -> ArticleStore:
    """Open an engine for *connection_string* and ping it.

    Falls back to ``Settings.database_url`` only when no string is given;
    an empty string is treated as malformed. Raises DatabaseConnectionError
    if the URL is malformed, its driver is unavailable, the server is
    unreachable, or authentication fails.
    """
    dsn = connection_string if connection_string is not None else get_settings().database_url
    engine: AsyncEngine | None = None
    try:
        engine = create_async_engine(_get_async_url(dsn), future=True)
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except _CONNECT_ERRORS as exc:
        if engine is not None:
            await engine.dispose()
        logger.error("Could not connect to database: %s", exc)
        raise DatabaseConnectionError(_redact(dsn), exc) from exc

    logger.info("Connected to %s", engine.url)
    return ArticleStore(engine)
