"""Demo catalog data for local development and tests.

Run with ``python -m src.services.seed`` to populate the configured Redis.
"""

from __future__ import annotations

import asyncio
import logging

from src.models.catalog import (
    CarouselImageCreate,
    CategoryCreate,
    ProductCreate,
    ShopInfoCreate,
)
from src.services.storage.base import CatalogStorage
from src.services.storage.redis_client import get_redis_client
from src.services.storage.redis_storage import RedisCatalogStorage

logger = logging.getLogger(__name__)

DEMO_CATEGORIES = [
    CategoryCreate(name="Necklaces", slug="necklaces", icon="gem", display_order=1),
    CategoryCreate(name="Earrings", slug="earrings", icon="sparkles", display_order=2),
    CategoryCreate(name="Rings", slug="rings", icon="circle", display_order=3),
    CategoryCreate(name="Bracelets", slug="bracelets", display_order=4),
    CategoryCreate(name="Bangles", slug="bangles", display_order=5),
    CategoryCreate(name="Pendants", slug="pendants", display_order=6),
    CategoryCreate(name="Jewelry Sets", slug="sets", display_order=7),
]

DEMO_PRODUCTS = [
    ProductCreate(
        name="Kundan Bridal Necklace",
        description="Handcrafted 22K gold necklace with kundan stones",
        price=245000,
        original_price=265000,
        image_url="https://images.example.com/kundan-necklace.jpg",
        category="necklaces",
        tags=["bridal", "kundan"],
        featured=True,
        display_order=1,
        purity="22K",
        weight="20g+",
        stone="Emerald",
        gender="Women",
        occasion="Bridal",
    ),
    ProductCreate(
        name="Diamond Solitaire Ring",
        description="18K white gold ring with a brilliant cut diamond",
        price=98000,
        image_url="https://images.example.com/solitaire-ring.jpg",
        category="rings",
        tags=["diamond"],
        display_order=2,
        purity="18K",
        weight="<5g",
        stone="Diamond",
        gender="Women",
        occasion="Festive",
    ),
    ProductCreate(
        name="Pearl Drop Earrings",
        description="Freshwater pearls on 14K gold hooks",
        price=18500,
        image_url="https://images.example.com/pearl-earrings.jpg",
        category="earrings",
        display_order=3,
        purity="14K",
        weight="<5g",
        stone="Pearl",
        gender="Women",
        occasion="Office Wear",
    ),
    ProductCreate(
        name="Classic Gold Kada",
        description="Solid 22K gold bangle for everyday wear",
        price=156000,
        image_url="https://images.example.com/gold-kada.jpg",
        category="bangles",
        display_order=4,
        purity="22K",
        weight="10g-20g",
        stone="None",
        gender="Men",
        occasion="Daily Wear",
    ),
]

DEMO_CAROUSEL = [
    CarouselImageCreate(
        image_url="https://images.example.com/banner-bridal.jpg",
        title="The Bridal Edit",
        subtitle="Heirloom pieces for your big day",
        button_text="Explore",
        button_link="/catalog",
        display_order=1,
    ),
]

DEMO_SHOP_INFO = ShopInfoCreate(
    address="12 Jewellers Lane, Jaipur",
    phone="+91 141 000 0000",
    email="hello@example.com",
    hours="Mon-Sat 10:00-20:00",
    instagram_url="https://instagram.com/example",
)


async def seed_demo_catalog(storage: CatalogStorage) -> bool:
    """Insert the demo documents when the store has no categories yet.

    Returns True when data was inserted.
    """

    if await storage.get_categories():
        logger.info("Catalog already populated, skipping seed")
        return False

    for category in DEMO_CATEGORIES:
        await storage.create_category(category)
    for product in DEMO_PRODUCTS:
        await storage.create_product(product)
    for image in DEMO_CAROUSEL:
        await storage.create_carousel_image(image)
    await storage.create_or_update_shop_info(DEMO_SHOP_INFO)

    logger.info(
        "Seeded demo catalog",
        extra={
            "categories": len(DEMO_CATEGORIES),
            "products": len(DEMO_PRODUCTS),
        },
    )
    return True


async def _main() -> None:
    client = get_redis_client()
    try:
        await seed_demo_catalog(RedisCatalogStorage(client))
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(_main())
