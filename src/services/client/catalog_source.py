"""Typed access to the catalog API through the data cache."""

from __future__ import annotations

from pydantic import TypeAdapter

from src.models.catalog import CarouselImage, Category, Product, ShopInfo
from src.models.filters import ALL_CATEGORIES
from src.services.client.data_cache import QueryKey, RemoteDataCache

_products = TypeAdapter(list[Product])
_categories = TypeAdapter(list[Category])
_carousel = TypeAdapter(list[CarouselImage])

PRODUCTS_PATH = "/api/products"
CATEGORIES_PATH = "/api/categories"
CAROUSEL_PATH = "/api/carousel"
SHOP_INFO_PATH = "/api/shop-info"


def products_key(category: str) -> QueryKey:
    return (PRODUCTS_PATH, category)


class CatalogDataSource:
    """Binds each catalog endpoint to its cache key and entity model."""

    def __init__(self, cache: RemoteDataCache) -> None:
        self.cache = cache

    async def products(self, category: str = ALL_CATEGORIES) -> list[Product]:
        params = None if category == ALL_CATEGORIES else {"category": category}
        return await self.cache.fetch(
            products_key(category),
            PRODUCTS_PATH,
            params,
            parse=_products.validate_python,
        )

    def cached_products(self, category: str) -> tuple[list[Product], bool]:
        """Return whatever the cache holds for ``category`` and its loading flag.

        Missing data, a pending first request and a failed request all yield
        an empty list.
        """

        state = self.cache.state(products_key(category))
        return state.data or [], state.is_loading

    async def categories(self) -> list[Category]:
        return await self.cache.fetch(
            (CATEGORIES_PATH,),
            CATEGORIES_PATH,
            parse=_categories.validate_python,
        )

    async def carousel(self) -> list[CarouselImage]:
        return await self.cache.fetch(
            (CAROUSEL_PATH,),
            CAROUSEL_PATH,
            parse=_carousel.validate_python,
        )

    async def shop_info(self) -> ShopInfo | None:
        return await self.cache.fetch(
            (SHOP_INFO_PATH,),
            SHOP_INFO_PATH,
            parse=ShopInfo.model_validate,
            allow_not_found=True,
        )
