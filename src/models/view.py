"""Derived catalog view returned to the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.models.catalog import Product


class CatalogView(BaseModel):
    """Visible products plus the strings shown around the product grid."""

    products: list[Product] = Field(default_factory=list)
    count: int = Field(0, ge=0)
    title: str
    count_label: str
    empty_message: str | None = None
    show_load_more: bool = False
    is_loading: bool = False
