"""Routes for catalog products."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query, status
from redis.exceptions import RedisError

from src.api.payloads import parse_payload, storage_failure, write_failure
from src.models.catalog import Product, ProductCreate
from src.services.storage.redis_storage import StorageDependency

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[Product], summary="List products")
async def list_products(
    storage: StorageDependency,
    category: str | None = Query(
        None,
        description="Category slug; omitted or 'all' returns every product",
    ),
) -> list[Product]:
    try:
        products = await storage.get_products(category)
    except RedisError as exc:
        raise storage_failure("fetch products", exc) from exc

    logger.debug("Listed %d products for category=%s", len(products), category)
    return products


@router.get("/{product_id}", response_model=Product, summary="Fetch a product")
async def get_product(product_id: str, storage: StorageDependency) -> Product:
    try:
        product = await storage.get_product_by_id(product_id)
    except RedisError as exc:
        raise storage_failure("fetch product", exc) from exc

    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
async def create_product(
    payload: dict[str, Any],
    storage: StorageDependency,
) -> Product:
    data = parse_payload(ProductCreate, payload, "product")
    try:
        product = await storage.create_product(data)
    except RedisError as exc:
        raise write_failure("product", exc) from exc

    logger.info(
        "[product-created]",
        extra={"product_id": product.id, "category": product.category},
    )
    return product
