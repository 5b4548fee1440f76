"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass


@dataclass
class Article:
    """Core domain entity representing one row of the articles table.

    ``id`` stays ``None`` until the database assigns it on insert.
    """

    title: str
    body: str
    author: str
    id: int | None = None
