"""System-level routes such as health checks."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from redis.exceptions import RedisError

from src.config import settings
from src.services.storage.redis_storage import StorageDependency

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/")
async def read_root() -> dict[str, str]:
    """Landing response for the API root."""

    return {"message": "Jewelry catalog API is running. Visit /docs for the OpenAPI UI."}


@router.get("/health")
async def health_check(storage: StorageDependency) -> dict[str, str]:
    """Health check endpoint with Redis connectivity check."""

    try:
        redis_status = "connected" if await storage.ping() else "disconnected"
    except (RedisError, OSError):
        logger.warning("Redis ping failed during health check")
        redis_status = "disconnected"

    return {
        "status": "healthy",
        "redis": redis_status,
        "environment": settings.ENVIRONMENT,
    }
