"""Routes for the home page carousel."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status
from redis.exceptions import RedisError

from src.api.payloads import parse_payload, storage_failure, write_failure
from src.models.catalog import CarouselImage, CarouselImageCreate
from src.services.storage.redis_storage import StorageDependency

router = APIRouter(prefix="/api/carousel", tags=["carousel"])


@router.get("", response_model=list[CarouselImage], summary="List active slides")
async def list_carousel_images(storage: StorageDependency) -> list[CarouselImage]:
    try:
        return await storage.get_carousel_images()
    except RedisError as exc:
        raise storage_failure("fetch carousel images", exc) from exc


@router.post(
    "",
    response_model=CarouselImage,
    status_code=status.HTTP_201_CREATED,
    summary="Create a slide",
)
async def create_carousel_image(
    payload: dict[str, Any],
    storage: StorageDependency,
) -> CarouselImage:
    data = parse_payload(CarouselImageCreate, payload, "carousel image")
    try:
        return await storage.create_carousel_image(data)
    except RedisError as exc:
        raise write_failure("carousel image", exc) from exc
