"""End-to-end tests for the catalog page coordinator against the API."""

from __future__ import annotations

import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.services.client.catalog_page import CatalogPage
from src.services.client.catalog_source import CatalogDataSource
from src.services.client.data_cache import RemoteDataCache
from src.services.seed import seed_demo_catalog

DEBOUNCE = 0.05


@pytest_asyncio.fixture()
async def page(storage):
    from src.main import app

    await seed_demo_catalog(storage)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as http:
        source = CatalogDataSource(RemoteDataCache(http))
        catalog_page = CatalogPage(source, debounce_seconds=DEBOUNCE)
        yield catalog_page


@pytest.mark.asyncio
async def test_view_is_empty_before_first_load(page):
    view = page.view()

    assert view.count == 0
    assert view.title == "All Jewelry"
    assert view.is_loading is False


@pytest.mark.asyncio
async def test_initial_load_shows_all_products(page):
    await page.load()
    view = page.view()

    assert view.count == 4
    assert view.count_label == "Showing 4 exquisite pieces"
    assert [p.name for p in view.products][0] == "Kundan Bridal Necklace"


@pytest.mark.asyncio
async def test_selecting_category_fetches_that_category(page):
    await page.load()
    await page.select_category("rings")
    view = page.view()

    assert view.title == "Rings"
    assert [p.name for p in view.products] == ["Diamond Solitaire Ring"]


@pytest.mark.asyncio
async def test_search_is_debounced(page):
    await page.load()

    page.type_search("p")
    page.type_search("pe")
    page.type_search("pearl")

    assert page.search_draft == "pearl"
    assert page.state.search_query == ""
    assert page.view().count == 4

    await asyncio.sleep(DEBOUNCE * 3)

    assert page.state.search_query == "pearl"
    assert [p.name for p in page.view().products] == ["Pearl Drop Earrings"]


@pytest.mark.asyncio
async def test_clear_search_cancels_pending_update(page):
    await page.load()
    page.type_search("kada")
    page.clear_search()

    await asyncio.sleep(DEBOUNCE * 3)

    assert page.search_draft == ""
    assert page.state.search_query == ""
    assert page.view().count == 4


@pytest.mark.asyncio
async def test_drawer_filters_and_reset(page):
    await page.load()

    page.set_price_range(0, 100000)
    page.toggle_facet("purity", "18K", True)
    narrowed = page.view()

    page.reset_filters()
    restored = page.view()

    assert [p.name for p in narrowed.products] == ["Diamond Solitaire Ring"]
    assert restored.count == 4


@pytest.mark.asyncio
async def test_no_match_reports_search_message(page):
    await page.load()
    page.type_search("platinum")
    await asyncio.sleep(DEBOUNCE * 3)

    view = page.view()

    assert view.count == 0
    assert view.count_label == "No products match your search"
