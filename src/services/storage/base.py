"""Storage interface for catalog documents."""

from __future__ import annotations

from abc import ABC, abstractmethod

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


class CatalogStorageError(Exception):
    """Base class for storage errors the API translates into HTTP responses."""


class CategoryNotFoundError(CatalogStorageError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"Category not found: {slug}")
        self.slug = slug


class DuplicateSlugError(CatalogStorageError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"Category slug already exists: {slug}")
        self.slug = slug


class CatalogStorage(ABC):
    """Collection-level CRUD for the catalog. No business logic lives here."""

    @abstractmethod
    async def get_categories(self) -> list[Category]:
        """Return every category sorted by ``display_order``."""

    @abstractmethod
    async def get_category_by_slug(self, slug: str) -> Category | None: ...

    @abstractmethod
    async def create_category(self, category: CategoryCreate) -> Category: ...

    @abstractmethod
    async def update_category(self, slug: str, updates: CategoryUpdate) -> Category:
        """Apply the explicitly set fields of ``updates``.

        Raises:
            CategoryNotFoundError: no category has ``slug``.
            DuplicateSlugError: the update renames onto an existing slug.
        """

    @abstractmethod
    async def get_products(self, category: str | None = None) -> list[Product]:
        """Return products sorted by ``display_order``.

        ``None`` and ``"all"`` both return every product.
        """

    @abstractmethod
    async def get_product_by_id(self, product_id: str) -> Product | None: ...

    @abstractmethod
    async def create_product(self, product: ProductCreate) -> Product: ...

    @abstractmethod
    async def get_carousel_images(self) -> list[CarouselImage]:
        """Return active slides sorted by ``display_order``."""

    @abstractmethod
    async def create_carousel_image(self, image: CarouselImageCreate) -> CarouselImage: ...

    @abstractmethod
    async def get_shop_info(self) -> ShopInfo | None: ...

    @abstractmethod
    async def create_or_update_shop_info(self, info: ShopInfoCreate) -> ShopInfo:
        """Store the single shop info document, keeping its id when replacing."""
