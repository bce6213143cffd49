"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError

from src.api.routes import include_api_routes
from src.config import settings
from src.services.storage.redis_client import get_redis_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the document store on startup and close it on shutdown."""
    client = get_redis_client()
    try:
        await client.ping()
        logger.info("Connected to Redis document store at %s", settings.REDIS_URL)
    except (RedisError, OSError):
        logger.exception("Redis document store unreachable at startup")

    yield

    await client.aclose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Jewelry Catalog",
        description="Storefront catalog API: categories, products, carousel, shop info",
        version="1.0.0",
        lifespan=lifespan,
    )

    _configure_cors(app)
    include_api_routes(app)

    return app


def _configure_cors(app: FastAPI) -> None:
    """Allow the storefront origins to call the API."""

    origins = ["*"] if not settings.is_production else settings.cors_origins
    if not origins:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )
