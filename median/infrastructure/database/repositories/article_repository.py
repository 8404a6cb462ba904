"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from median.application.interfaces import ArticleRepository
from median.domain.entities import Article
from median.domain.exceptions import EntityNotFoundError, MalformedIdentifierError
from median.infrastructure.database.errors import translate_store_errors
from median.infrastructure.database.models import ArticleModel

# ``articles.id`` is a 32-bit INTEGER column; nothing outside this range can match.
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            description=model.description,
            body=model.body,
            published=model.published,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            description=entity.description,
            body=entity.body,
            published=entity.published,
        )

    async def _find_by_published(self, published: bool) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.published.is_(published))
            .order_by(ArticleModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_published(self) -> list[Article]:
        return await self._find_by_published(True)

    async def find_drafts(self) -> list[Article]:
        return await self._find_by_published(False)

    async def find_by_id(self, article_id: int) -> Article | None:
        if isinstance(article_id, bool) or not isinstance(article_id, int):
            raise MalformedIdentifierError(article_id)
        if not _MIN_ID <= article_id <= _MAX_ID:
            return None
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        with translate_store_errors():
            await self._session.flush()
            await self._session.commit()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id)
        model.title = article.title
        model.description = article.description
        model.body = article.body
        model.published = article.published
        model.updated_at = article.updated_at
        with translate_store_errors():
            await self._session.flush()
            await self._session.commit()
        return self._to_entity(model)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(ArticleModel))
        return result.scalar_one()
