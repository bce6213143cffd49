"""Tests for the Redis-backed catalog storage."""

from __future__ import annotations

import pytest

from src.models.catalog import (
    CarouselImageCreate,
    CategoryCreate,
    CategoryUpdate,
    ProductCreate,
    ShopInfoCreate,
)
from src.services.seed import DEMO_CATEGORIES, DEMO_PRODUCTS, seed_demo_catalog
from src.services.storage.base import CategoryNotFoundError, DuplicateSlugError


def _product(name: str, category: str, display_order: int) -> ProductCreate:
    return ProductCreate(
        name=name,
        price=1000,
        image_url="https://images.example.com/x.jpg",
        category=category,
        display_order=display_order,
    )


@pytest.mark.asyncio
async def test_categories_sorted_by_display_order(storage):
    await storage.create_category(CategoryCreate(name="Rings", slug="rings", display_order=3))
    await storage.create_category(CategoryCreate(name="Necklaces", slug="necklaces", display_order=1))

    categories = await storage.get_categories()

    assert [c.slug for c in categories] == ["necklaces", "rings"]
    assert all(c.id for c in categories)


@pytest.mark.asyncio
async def test_duplicate_slug_is_rejected(storage):
    await storage.create_category(CategoryCreate(name="Rings", slug="rings"))

    with pytest.raises(DuplicateSlugError):
        await storage.create_category(CategoryCreate(name="Other", slug="rings"))


@pytest.mark.asyncio
async def test_update_category_applies_only_sent_fields(storage):
    created = await storage.create_category(
        CategoryCreate(name="Rings", slug="rings", icon="circle", display_order=2)
    )

    updated = await storage.update_category("rings", CategoryUpdate(display_order=9))

    assert updated.id == created.id
    assert updated.icon == "circle"
    assert updated.display_order == 9


@pytest.mark.asyncio
async def test_update_category_can_change_slug(storage):
    await storage.create_category(CategoryCreate(name="Sets", slug="sets"))

    await storage.update_category("sets", CategoryUpdate(slug="jewelry-sets"))

    assert await storage.get_category_by_slug("sets") is None
    assert (await storage.get_category_by_slug("jewelry-sets")).name == "Sets"


@pytest.mark.asyncio
async def test_update_unknown_category_raises(storage):
    with pytest.raises(CategoryNotFoundError):
        await storage.update_category("missing", CategoryUpdate(name="X"))


@pytest.mark.asyncio
async def test_products_filtered_by_category_and_sorted(storage):
    await storage.create_product(_product("B", "rings", 2))
    await storage.create_product(_product("A", "rings", 1))
    await storage.create_product(_product("C", "earrings", 0))

    rings = await storage.get_products("rings")
    everything = await storage.get_products("all")
    unfiltered = await storage.get_products()

    assert [p.name for p in rings] == ["A", "B"]
    assert [p.name for p in everything] == ["C", "A", "B"]
    assert [p.name for p in unfiltered] == ["C", "A", "B"]


@pytest.mark.asyncio
async def test_product_defaults_and_lookup(storage):
    created = await storage.create_product(_product("Band", "rings", 0))

    fetched = await storage.get_product_by_id(created.id)

    assert fetched == created
    assert fetched.tags == []
    assert fetched.featured is False
    assert fetched.in_stock is True
    assert await storage.get_product_by_id("missing") is None


@pytest.mark.asyncio
async def test_carousel_only_returns_active_slides(storage):
    await storage.create_carousel_image(
        CarouselImageCreate(image_url="https://x/2.jpg", title="Second", display_order=2)
    )
    await storage.create_carousel_image(
        CarouselImageCreate(image_url="https://x/1.jpg", title="First", display_order=1)
    )
    await storage.create_carousel_image(
        CarouselImageCreate(image_url="https://x/3.jpg", title="Hidden", active=False)
    )

    images = await storage.get_carousel_images()

    assert [i.title for i in images] == ["First", "Second"]


@pytest.mark.asyncio
async def test_shop_info_is_a_singleton(storage):
    assert await storage.get_shop_info() is None

    info = ShopInfoCreate(address="A", phone="1", email="a@example.com", hours="9-5")
    first = await storage.create_or_update_shop_info(info)
    second = await storage.create_or_update_shop_info(info.model_copy(update={"phone": "2"}))

    assert first.id == second.id
    assert (await storage.get_shop_info()).phone == "2"


@pytest.mark.asyncio
async def test_seed_runs_once(storage):
    assert await seed_demo_catalog(storage) is True
    assert await seed_demo_catalog(storage) is False

    assert len(await storage.get_categories()) == len(DEMO_CATEGORIES)
    assert len(await storage.get_products()) == len(DEMO_PRODUCTS)
    assert await storage.get_shop_info() is not None
