"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from median.presentation.api.endpoints.health import router as health_router
from median.presentation.api.endpoints.articles import router as articles_router

router = APIRouter()
router.include_router(health_router)
router.include_router(articles_router)
