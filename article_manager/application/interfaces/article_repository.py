"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from article_manager.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, title: str, body: str, author: str) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article. Order is backend-defined."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article:
        """Retrieve a single article. Raises EntityNotFoundError when missing."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Overwrite title, body and author of an existing article.

        Raises EntityNotFoundError when no row has ``article.id``.
        """
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> None:
        """Delete an article. A missing ID is not an error."""
        ...
