"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from median.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations raise ``StoreRequestError`` for classified store failures
    and ``MalformedIdentifierError`` when ``find_by_id`` receives a non-integer.
    """

    @abstractmethod
    async def find_published(self) -> list[Article]:
        """Retrieve all articles with ``published=True``."""
        ...

    @abstractmethod
    async def find_drafts(self) -> list[Article]:
        """Retrieve all articles with ``published=False``."""
        ...

    @abstractmethod
    async def find_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID, or None when absent."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID and timestamps."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Persist changes to an existing article."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored articles."""
        ...
