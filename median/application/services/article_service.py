"""Application service (use case) for Article operations."""

import logging

from median.application.interfaces import ArticleRepository
from median.application.validation import (
    parse_article_id,
    validate_article_input,
    validate_article_update,
)
from median.domain.entities import Article
from median.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Every operation validates its input completely before the repository is
    called; failures surface as domain exceptions for the API layer to map.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def list_published(self) -> list[Article]:
        return await self._repository.find_published()

    async def list_drafts(self) -> list[Article]:
        return await self._repository.find_drafts()

    async def get_article(self, raw_id: object) -> Article:
        article_id = parse_article_id(raw_id)
        article = await self._repository.find_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def create_article(self, payload: object) -> Article:
        data = validate_article_input(payload).unwrap()
        article = Article(
            title=data.title,
            description=data.description,
            body=data.body,
            published=data.published,
        )
        created = await self._repository.create(article)
        logger.info("Created article %s (published=%s)", created.id, created.published)
        return created

    async def update_article(self, raw_id: object, payload: object) -> Article:
        article_id = parse_article_id(raw_id)
        data = validate_article_update(payload).unwrap()
        article = await self.get_article(article_id)
        article.update(data.changes())
        return await self._repository.update(article)
