"""Catalog domain models and API schemas.

Documents travel over the wire in camelCase (``imageUrl``, ``displayOrder``,
...). Identifiers are emitted as ``id``; inbound documents may use the
document-store spelling ``_id`` instead.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base model with camelCase aliases shared by every catalog document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _id_field():
    return Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "_id"),
        description="Opaque document identifier",
    )


class CategoryCreate(CatalogModel):
    """Payload used to create a category."""

    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, description="Unique routing/filter key")
    icon: str | None = None
    image_url: str | None = None
    display_order: int = 0


class CategoryUpdate(CatalogModel):
    """Partial category update. Only explicitly sent fields are applied."""

    name: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1)
    icon: str | None = None
    image_url: str | None = None
    display_order: int | None = None


class Category(CategoryCreate):
    id: str = _id_field()


class ProductCreate(CatalogModel):
    """Payload used to create a product."""

    name: str = Field(..., min_length=1)
    description: str | None = ""
    price: float = Field(..., ge=0)
    original_price: float | None = Field(
        None,
        ge=0,
        description="Present only when the item is discounted",
    )
    image_url: str
    category: str = Field(..., description="Slug of the owning category")
    tags: list[str] = Field(default_factory=list)
    featured: bool = False
    in_stock: bool = True
    display_order: int = 0

    # Facet attributes used by the filter drawer. Free text, not validated.
    purity: str | None = None
    weight: str | None = None
    stone: str | None = None
    gender: str | None = None
    occasion: str | None = None


class Product(ProductCreate):
    id: str = _id_field()


class CarouselImageCreate(CatalogModel):
    """Payload used to create a carousel slide."""

    image_url: str
    title: str
    subtitle: str | None = None
    button_text: str | None = None
    button_link: str | None = None
    display_order: int = 0
    active: bool = True


class CarouselImage(CarouselImageCreate):
    id: str = _id_field()


class ShopInfoCreate(CatalogModel):
    """Contact details shown in the drawer and footer."""

    address: str
    phone: str
    email: str
    hours: str
    facebook_url: str | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    pinterest_url: str | None = None


class ShopInfo(ShopInfoCreate):
    id: str = _id_field()
