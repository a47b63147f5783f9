"""Catalog lookup proxy router."""

from fastapi import APIRouter, Query

from api.dependencies import CatalogDep, CurrentUser
from api.literals import CATALOG_BASE_PATH, MAX_LIMIT, MIN_LIMIT
from core.constants import COVER_LIMIT, SUGGESTION_LIMIT
from core.models.domain.catalog import CatalogSuggestion

router = APIRouter(prefix=CATALOG_BASE_PATH, tags=["catalog"])


@router.get("/suggestions", response_model=list[CatalogSuggestion])
async def get_suggestions(
    user: CurrentUser,
    catalog: CatalogDep,
    title: str = Query(default="", description="Title being typed"),
    author: str | None = Query(default=None, description="Optional author"),
    limit: int = Query(default=SUGGESTION_LIMIT, ge=MIN_LIMIT, le=MAX_LIMIT),
) -> list[CatalogSuggestion]:
    """Title suggestions from the catalog. Upstream failures yield []."""
    return await catalog.suggest_titles(title, author, limit)


@router.get("/covers", response_model=list[str])
async def get_covers(
    user: CurrentUser,
    catalog: CatalogDep,
    title: str = Query(default="", description="Book title"),
    author: str | None = Query(default=None, description="Optional author"),
    limit: int = Query(default=COVER_LIMIT, ge=MIN_LIMIT, le=MAX_LIMIT),
) -> list[str]:
    """Cover image URLs for a title. Upstream failures yield []."""
    return await catalog.find_covers(title, author, limit)
