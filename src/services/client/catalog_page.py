"""Catalog page coordinator.

Owns the page's ``FilterState``, turns user actions into state replacements
and re-derives the visible products from whatever the data cache currently
holds for the selected category.
"""

from __future__ import annotations

import asyncio
import logging

from src.config import settings
from src.models.filters import FacetName, FilterState
from src.models.view import CatalogView
from src.services.catalog.filter_engine import build_catalog_view
from src.services.client.catalog_source import CatalogDataSource
from src.services.client.data_cache import DataFetchError

logger = logging.getLogger(__name__)


class CatalogPage:
    """One catalog browsing session. State is discarded with the instance."""

    def __init__(
        self,
        data_source: CatalogDataSource,
        *,
        debounce_seconds: float | None = None,
    ) -> None:
        self._source = data_source
        self._debounce = (
            settings.SEARCH_DEBOUNCE_SECONDS
            if debounce_seconds is None
            else debounce_seconds
        )
        self._pending_search: asyncio.TimerHandle | None = None
        self.state = FilterState()
        self.search_draft = ""

    async def load(self) -> None:
        """Fetch products for the selected category.

        A failed fetch is logged and leaves the view empty, as the error
        already sits on the cache entry.
        """

        category = self.state.selected_category
        try:
            await self._source.products(category)
        except DataFetchError as exc:
            logger.warning("Could not load products for %s: %s", category, exc)

    async def select_category(self, slug: str) -> None:
        self.state = self.state.with_category(slug)
        await self.load()

    def type_search(self, text: str) -> None:
        """Record a keystroke; the query reaches the state after a quiet period."""

        self.search_draft = text
        if self._pending_search is not None:
            self._pending_search.cancel()

        loop = asyncio.get_running_loop()
        self._pending_search = loop.call_later(
            self._debounce, self._commit_search, text
        )

    def _commit_search(self, text: str) -> None:
        self._pending_search = None
        self.state = self.state.with_search_query(text)

    def clear_search(self) -> None:
        if self._pending_search is not None:
            self._pending_search.cancel()
            self._pending_search = None
        self.search_draft = ""
        self.state = self.state.with_search_query("")

    def set_price_range(self, minimum: float, maximum: float) -> None:
        self.state = self.state.with_price_range(minimum, maximum)

    def toggle_facet(self, facet: FacetName, label: str, checked: bool) -> None:
        self.state = self.state.toggle_facet(facet, label, checked)

    def reset_filters(self) -> None:
        self.state = self.state.reset_filters()

    def view(self) -> CatalogView:
        products, is_loading = self._source.cached_products(
            self.state.selected_category
        )
        return build_catalog_view(products, self.state, is_loading=is_loading)
