"""Filter state for the catalog page.

The state is immutable: every update method returns a new ``FilterState``
that replaces exactly one slice and shares the rest.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

from src.config import settings

ALL_CATEGORIES = "all"

FacetName = Literal["purity", "weight", "stone", "gender", "occasion"]
FACET_NAMES: tuple[str, ...] = get_args(FacetName)

# Labels offered by the filter drawer. Product attributes are not validated
# against these.
FACET_OPTIONS: dict[str, tuple[str, ...]] = {
    "purity": ("22K", "18K", "14K", "24K"),
    "weight": ("<5g", "5g-10g", "10g-20g", "20g+"),
    "stone": ("Diamond", "Emerald", "Ruby", "Sapphire", "Pearl", "None"),
    "gender": ("Men", "Women", "Kids"),
    "occasion": ("Daily Wear", "Bridal", "Office Wear", "Festive"),
}

PriceRange = tuple[float, float]


def default_price_range() -> PriceRange:
    return (settings.DEFAULT_PRICE_MIN, settings.DEFAULT_PRICE_MAX)


class FacetFilters(BaseModel):
    """Selected labels per facet. An empty tuple means no restriction."""

    model_config = ConfigDict(frozen=True)

    purity: tuple[str, ...] = ()
    weight: tuple[str, ...] = ()
    stone: tuple[str, ...] = ()
    gender: tuple[str, ...] = ()
    occasion: tuple[str, ...] = ()

    def selected(self, facet: FacetName) -> tuple[str, ...]:
        return getattr(self, facet)

    def toggle(self, facet: FacetName, label: str, checked: bool) -> FacetFilters:
        """Return a copy with ``label`` added to or removed from ``facet``."""

        current = self.selected(facet)
        if checked:
            if label in current:
                return self
            updated = (*current, label)
        else:
            updated = tuple(value for value in current if value != label)
        return self.model_copy(update={facet: updated})

    @property
    def is_empty(self) -> bool:
        return not any(self.selected(facet) for facet in FACET_NAMES)


class FilterState(BaseModel):
    """Complete set of active catalog filters at a point in time."""

    model_config = ConfigDict(frozen=True)

    selected_category: str = ALL_CATEGORIES
    search_query: str = ""
    price_range: PriceRange = Field(default_factory=default_price_range)
    facet_filters: FacetFilters = Field(default_factory=FacetFilters)

    def with_category(self, slug: str) -> FilterState:
        return self.model_copy(update={"selected_category": slug})

    def with_search_query(self, query: str) -> FilterState:
        return self.model_copy(update={"search_query": query})

    def with_price_range(self, minimum: float, maximum: float) -> FilterState:
        # Bounds are stored as given; callers keep minimum <= maximum.
        return self.model_copy(update={"price_range": (minimum, maximum)})

    def with_facet(self, facet: FacetName, labels: tuple[str, ...]) -> FilterState:
        facets = self.facet_filters.model_copy(update={facet: tuple(labels)})
        return self.model_copy(update={"facet_filters": facets})

    def toggle_facet(self, facet: FacetName, label: str, checked: bool) -> FilterState:
        facets = self.facet_filters.toggle(facet, label, checked)
        return self.model_copy(update={"facet_filters": facets})

    def reset_filters(self) -> FilterState:
        """Restore the drawer filters (price and facets); keep category and query."""

        return self.model_copy(
            update={
                "price_range": default_price_range(),
                "facet_filters": FacetFilters(),
            }
        )

    @property
    def has_search(self) -> bool:
        return bool(self.search_query.strip())
