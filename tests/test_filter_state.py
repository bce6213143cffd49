"""Tests for the immutable catalog filter state."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models.filters import FACET_NAMES, FACET_OPTIONS, FacetFilters, FilterState


def test_defaults():
    state = FilterState()

    assert state.selected_category == "all"
    assert state.search_query == ""
    assert state.price_range == (0, 500000)
    assert state.facet_filters.is_empty
    assert not state.has_search


def test_updates_replace_one_slice_and_keep_original():
    original = FilterState()

    updated = original.with_category("rings").with_search_query("gold")

    assert original.selected_category == "all"
    assert original.search_query == ""
    assert updated.selected_category == "rings"
    assert updated.search_query == "gold"
    assert updated.price_range == original.price_range


def test_state_is_frozen():
    state = FilterState()

    with pytest.raises(ValidationError):
        state.search_query = "ring"


def test_price_range_is_stored_as_given():
    state = FilterState().with_price_range(20000, 5000)

    assert state.price_range == (20000, 5000)


def test_toggle_facet_adds_once_and_removes():
    state = FilterState().toggle_facet("stone", "Diamond", True)
    state = state.toggle_facet("stone", "Diamond", True)
    state = state.toggle_facet("stone", "Ruby", True)

    assert state.facet_filters.stone == ("Diamond", "Ruby")

    state = state.toggle_facet("stone", "Diamond", False)

    assert state.facet_filters.stone == ("Ruby",)
    assert state.facet_filters.purity == ()


def test_with_facet_replaces_selection():
    state = FilterState().with_facet("occasion", ("Bridal", "Festive"))

    assert state.facet_filters.selected("occasion") == ("Bridal", "Festive")
    assert not state.facet_filters.is_empty


def test_reset_filters_keeps_category_and_query():
    state = (
        FilterState()
        .with_category("earrings")
        .with_search_query("pearl")
        .with_price_range(1000, 2000)
        .toggle_facet("purity", "18K", True)
    )

    reset = state.reset_filters()

    assert reset.selected_category == "earrings"
    assert reset.search_query == "pearl"
    assert reset.price_range == (0, 500000)
    assert reset.facet_filters == FacetFilters()


def test_facet_vocabulary_covers_every_facet():
    assert set(FACET_OPTIONS) == set(FACET_NAMES)
    assert "Daily Wear" in FACET_OPTIONS["occasion"]
