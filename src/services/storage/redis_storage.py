"""Redis-backed document store for the catalog.

Each collection is a Redis hash of JSON documents:

* ``<prefix>categories`` keyed by slug (slug uniqueness comes from ``HSETNX``)
* ``<prefix>products`` keyed by product id
* ``<prefix>carousel_images`` keyed by slide id
* ``<prefix>shop_info`` a single JSON string
"""

from __future__ import annotations

import logging
import uuid
from typing import Annotated, TypeVar

import redis.asyncio as redis
from fastapi import Depends
from pydantic import BaseModel

from src.config import settings
from src.models.catalog import (
    CarouselImage,
    CarouselImageCreate,
    Category,
    CategoryCreate,
    CategoryUpdate,
    Product,
    ProductCreate,
    ShopInfo,
    ShopInfoCreate,
)
from src.models.filters import ALL_CATEGORIES
from src.services.storage.base import (
    CatalogStorage,
    CategoryNotFoundError,
    DuplicateSlugError,
)
from src.services.storage.redis_client import get_redis_client

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=BaseModel)


class RedisCatalogStorage(CatalogStorage):
    """Catalog storage over an injected ``redis.asyncio`` client."""

    def __init__(self, client: redis.Redis, key_prefix: str | None = None) -> None:
        self._client = client
        self._prefix = settings.CATALOG_KEY_PREFIX if key_prefix is None else key_prefix

    def _key(self, collection: str) -> str:
        return f"{self._prefix}{collection}"

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex

    @staticmethod
    def _dump(document: BaseModel) -> str:
        return document.model_dump_json(by_alias=True)

    async def _load_all(self, collection: str, model: type[DocumentT]) -> list[DocumentT]:
        raw = await self._client.hgetall(self._key(collection))
        return [model.model_validate_json(value) for value in raw.values()]

    # Categories

    async def get_categories(self) -> list[Category]:
        categories = await self._load_all("categories", Category)
        return sorted(categories, key=lambda c: c.display_order)

    async def get_category_by_slug(self, slug: str) -> Category | None:
        raw = await self._client.hget(self._key("categories"), slug)
        if not raw:
            return None
        return Category.model_validate_json(raw)

    async def create_category(self, category: CategoryCreate) -> Category:
        created = Category(id=self._new_id(), **category.model_dump())
        inserted = await self._client.hsetnx(
            self._key("categories"), created.slug, self._dump(created)
        )
        if not inserted:
            raise DuplicateSlugError(created.slug)

        logger.info("Created category %s (%s)", created.slug, created.id)
        return created

    async def update_category(self, slug: str, updates: CategoryUpdate) -> Category:
        existing = await self.get_category_by_slug(slug)
        if existing is None:
            raise CategoryNotFoundError(slug)

        # Explicit nulls only clear optional fields.
        changes = {
            field: value
            for field, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or field in ("icon", "image_url")
        }
        updated = Category(**{**existing.model_dump(), **changes})
        key = self._key("categories")

        if updated.slug != slug:
            inserted = await self._client.hsetnx(key, updated.slug, self._dump(updated))
            if not inserted:
                raise DuplicateSlugError(updated.slug)
            await self._client.hdel(key, slug)
        else:
            await self._client.hset(key, slug, self._dump(updated))

        logger.info(
            "Updated category %s",
            slug,
            extra={"fields": sorted(changes)},
        )
        return updated

    # Products

    async def get_products(self, category: str | None = None) -> list[Product]:
        products = await self._load_all("products", Product)
        if category and category != ALL_CATEGORIES:
            products = [p for p in products if p.category == category]
        return sorted(products, key=lambda p: p.display_order)

    async def get_product_by_id(self, product_id: str) -> Product | None:
        raw = await self._client.hget(self._key("products"), product_id)
        if not raw:
            return None
        return Product.model_validate_json(raw)

    async def create_product(self, product: ProductCreate) -> Product:
        created = Product(id=self._new_id(), **product.model_dump())
        await self._client.hset(self._key("products"), created.id, self._dump(created))
        logger.info("Created product %s in %s", created.id, created.category)
        return created

    # Carousel

    async def get_carousel_images(self) -> list[CarouselImage]:
        images = await self._load_all("carousel_images", CarouselImage)
        active = [image for image in images if image.active]
        return sorted(active, key=lambda i: i.display_order)

    async def create_carousel_image(self, image: CarouselImageCreate) -> CarouselImage:
        created = CarouselImage(id=self._new_id(), **image.model_dump())
        await self._client.hset(
            self._key("carousel_images"), created.id, self._dump(created)
        )
        return created

    # Shop info

    async def get_shop_info(self) -> ShopInfo | None:
        raw = await self._client.get(self._key("shop_info"))
        if not raw:
            return None
        return ShopInfo.model_validate_json(raw)

    async def create_or_update_shop_info(self, info: ShopInfoCreate) -> ShopInfo:
        existing = await self.get_shop_info()
        shop_id = existing.id if existing else self._new_id()
        stored = ShopInfo(id=shop_id, **info.model_dump())
        await self._client.set(self._key("shop_info"), self._dump(stored))
        return stored

    async def ping(self) -> bool:
        return bool(await self._client.ping())


def get_catalog_storage() -> RedisCatalogStorage:
    """FastAPI dependency returning storage bound to the process Redis client."""

    return RedisCatalogStorage(get_redis_client())


StorageDependency = Annotated[RedisCatalogStorage, Depends(get_catalog_storage)]
