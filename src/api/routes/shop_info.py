"""Routes for the shop's contact details."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, status
from redis.exceptions import RedisError

from src.api.payloads import parse_payload, storage_failure, write_failure
from src.models.catalog import ShopInfo, ShopInfoCreate
from src.services.storage.redis_storage import StorageDependency

router = APIRouter(prefix="/api/shop-info", tags=["shop-info"])


@router.get("", response_model=ShopInfo, summary="Fetch shop info")
async def get_shop_info(storage: StorageDependency) -> ShopInfo:
    try:
        info = await storage.get_shop_info()
    except RedisError as exc:
        raise storage_failure("fetch shop info", exc) from exc

    if info is None:
        raise HTTPException(status_code=404, detail="Shop info not found")
    return info


@router.post(
    "",
    response_model=ShopInfo,
    status_code=status.HTTP_200_OK,
    summary="Create or replace shop info",
)
async def save_shop_info(
    payload: dict[str, Any],
    storage: StorageDependency,
) -> ShopInfo:
    data = parse_payload(ShopInfoCreate, payload, "shop info")
    try:
        return await storage.create_or_update_shop_info(data)
    except RedisError as exc:
        raise write_failure("shop info", exc) from exc
