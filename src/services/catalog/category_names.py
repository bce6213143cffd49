"""Display names for the catalog title."""

from __future__ import annotations

from src.models.filters import ALL_CATEGORIES

# The catalog title always comes from this table, not from Category.name, so
# renaming a category in the store does not change the page heading.
CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    ALL_CATEGORIES: "All Jewelry",
    "necklaces": "Necklaces",
    "earrings": "Earrings",
    "rings": "Rings",
    "bracelets": "Bracelets",
    "bangles": "Bangles",
    "pendants": "Pendants",
    "sets": "Jewelry Sets",
}


def resolve_category_display_name(slug: str) -> str:
    """Return the heading for ``slug``, falling back to the "all" label."""

    return CATEGORY_DISPLAY_NAMES.get(slug, CATEGORY_DISPLAY_NAMES[ALL_CATEGORIES])
