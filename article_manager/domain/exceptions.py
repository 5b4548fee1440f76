"""Domain-specific exceptions — framework-independent."""


class ArticleManagerError(Exception):
    """Base class for every error raised by the article store."""


class DatabaseConnectionError(ArticleManagerError):
    """Raised when the database cannot be reached or fails the liveness check.

    ``connection_string`` is stored with any password already masked.
    """

    def __init__(self, connection_string: str, original: BaseException):
        self.connection_string = connection_string
        self.original = original
        super().__init__(str(original))


class EntityNotFoundError(ArticleManagerError):
    """Raised when a query or update matched no row where one was expected."""

    def __init__(self, entity_type: str, entity_id: int | str | None, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type} with id '{entity_id}' not found")


class PersistenceError(ArticleManagerError):
    """Raised when the database reports any other failure.

    The driver or SQLAlchemy exception is kept on ``original`` and chained
    as ``__cause__``; the message is passed through unchanged.
    """

    def __init__(self, operation: str, original: BaseException):
        self.operation = operation
        self.original = original
        super().__init__(str(original))
