"""Logging levels for the article store and the database stack underneath it.

The store logs through ``logging.getLogger(__name__)`` like any library and
never installs handlers on import. Applications that want the store's
connect/operation messages separated from SQLAlchemy statement echo call
``setup_logging()`` once before ``connect()``; the levels come from
``Settings.log_level``, ``log_level_sql`` and ``log_level_store``.
"""

import logging
import sys

from article_manager.config import get_settings

# Settings field -> loggers it governs.
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
        "asyncpg",
    ],
    "log_level_store": [
        "article_manager.infrastructure.database",
    ],
}


def setup_logging() -> None:
    """Apply root, SQL and store log levels from settings."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s store=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_store,
    )


def _parse_level(raw: str) -> int:
    """Level name -> logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
