"""Article endpoints.

Failures are raised as domain exceptions and rendered by the handlers in
``median.presentation.api.error_handlers``.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from median.application.schemas import ArticleResponse
from median.application.services import ArticleService
from median.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_published_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve all published articles."""
    articles = await service.list_published()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/drafts", response_model=list[ArticleResponse])
async def list_draft_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve all unpublished (draft) articles."""
    articles = await service.list_drafts()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    article = await service.get_article(article_id)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    payload: Any = Body(
        ...,
        examples=[{"title": "Getting Started", "body": "Hello.", "published": False}],
    ),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(payload)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.patch("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    payload: Any = Body(..., examples=[{"published": True}]),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update fields of an existing article."""
    article = await service.update_article(article_id, payload)
    return ArticleResponse.model_validate(article, from_attributes=True)
