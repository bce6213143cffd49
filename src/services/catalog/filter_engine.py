"""Client-side product filtering.

``derive_visible_products`` is a pure function of the fetched product list and
the current ``FilterState``. Every active filter is an independent predicate;
a product is visible only when it passes all of them. The input order is kept
and nothing is mutated.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.config import settings
from src.models.catalog import Product
from src.models.filters import ALL_CATEGORIES, FACET_NAMES, FacetFilters, FilterState
from src.models.view import CatalogView
from src.services.catalog.category_names import resolve_category_display_name


def matches_category(product: Product, selected_category: str) -> bool:
    if selected_category == ALL_CATEGORIES:
        return True
    return product.category == selected_category


def matches_search(product: Product, search_query: str) -> bool:
    """Case-insensitive substring match on name, description and category."""

    if not search_query.strip():
        return True

    query = search_query.lower()
    return (
        query in product.name.lower()
        or query in (product.description or "").lower()
        or query in (product.category or "").lower()
    )


def matches_price(product: Product, price_range: tuple[float, float]) -> bool:
    minimum, maximum = price_range
    return minimum <= product.price <= maximum


def matches_facets(product: Product, facet_filters: FacetFilters) -> bool:
    for facet in FACET_NAMES:
        labels = facet_filters.selected(facet)
        # An empty selection leaves this facet unconstrained.
        if len(labels) > 0:
            value = getattr(product, facet)
            if value is None or value not in labels:
                return False
    return True


def is_visible(product: Product, state: FilterState) -> bool:
    return (
        matches_category(product, state.selected_category)
        and matches_price(product, state.price_range)
        and matches_facets(product, state.facet_filters)
        and matches_search(product, state.search_query)
    )


def derive_visible_products(
    products: Sequence[Product] | None,
    state: FilterState,
) -> list[Product]:
    """Return the products that pass every active filter, in input order.

    ``None`` (no data fetched yet) is treated as an empty list. The state is
    applied as-is: a price range with ``min > max`` simply matches nothing.
    """

    if not products:
        return []
    return [product for product in products if is_visible(product, state)]


def _count_label(count: int, state: FilterState) -> str:
    if count > 0:
        noun = "piece" if count == 1 else "pieces"
        return f"Showing {count} exquisite {noun}"
    if state.search_query:
        return "No products match your search"
    return "No products found in this category"


def _empty_message(count: int, state: FilterState) -> str | None:
    if count > 0:
        return None
    if state.search_query:
        return "No products match your search criteria. Try adjusting your filters."
    return "No products available in this category yet."


def build_catalog_view(
    products: Sequence[Product] | None,
    state: FilterState,
    *,
    is_loading: bool = False,
) -> CatalogView:
    """Derive the visible products together with the grid's display strings."""

    visible = derive_visible_products(products, state)
    count = len(visible)
    return CatalogView(
        products=visible,
        count=count,
        title=resolve_category_display_name(state.selected_category),
        count_label=_count_label(count, state),
        empty_message=_empty_message(count, state),
        show_load_more=count >= settings.LOAD_MORE_THRESHOLD,
        is_loading=is_loading,
    )
