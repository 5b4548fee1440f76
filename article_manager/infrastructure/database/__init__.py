from .repositories import ArticleStore
from .session import connect

__all__ = [
    "ArticleStore",
    "connect",
]
