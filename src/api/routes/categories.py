"""Routes for catalog categories."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status
from redis.exceptions import RedisError

from src.api.payloads import parse_payload, storage_failure, write_failure
from src.models.catalog import Category, CategoryCreate, CategoryUpdate
from src.services.storage.base import CategoryNotFoundError, DuplicateSlugError
from src.services.storage.redis_storage import StorageDependency

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[Category], summary="List categories")
async def list_categories(storage: StorageDependency) -> list[Category]:
    try:
        return await storage.get_categories()
    except RedisError as exc:
        raise storage_failure("fetch categories", exc) from exc


@router.get("/{slug}", response_model=Category, summary="Fetch a category by slug")
async def get_category(slug: str, storage: StorageDependency) -> Category:
    try:
        category = await storage.get_category_by_slug(slug)
    except RedisError as exc:
        raise storage_failure("fetch category", exc) from exc

    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post(
    "",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
async def create_category(
    payload: dict[str, Any],
    storage: StorageDependency,
) -> Category:
    data = parse_payload(CategoryCreate, payload, "category")
    try:
        return await storage.create_category(data)
    except DuplicateSlugError as exc:
        logger.warning("Duplicate category slug %s", exc.slug)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid category data",
        ) from exc
    except RedisError as exc:
        raise write_failure("category", exc) from exc


@router.patch("/{slug}", response_model=Category, summary="Update a category")
async def update_category(
    slug: str,
    payload: dict[str, Any],
    storage: StorageDependency,
) -> Category:
    updates = parse_payload(CategoryUpdate, payload, "category")
    try:
        return await storage.update_category(slug, updates)
    except (CategoryNotFoundError, DuplicateSlugError, RedisError) as exc:
        logger.warning("Category update for %s rejected: %s", slug, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to update category",
        ) from exc
