"""
Read-only queries over a loaded Catalog.

List and search return EaterySummary (no reviews), in catalog order.
Point lookup returns the full Eatery, or None when the id is unknown.
"""

from backend.catalog.catalog import Catalog
from models import Eatery, EaterySummary, summarize


def list_eateries(catalog: Catalog) -> list[EaterySummary]:
    return [summarize(eatery) for eatery in catalog.eateries]


def get_eatery(catalog: Catalog, eatery_id: int) -> Eatery | None:
    """First eatery with this id, or None."""
    return catalog.lookup(eatery_id)


def search_eateries(catalog: Catalog, name: str) -> list[EaterySummary]:
    """Case-insensitive substring match on name. An empty query matches every eatery."""
    needle = name.lower()
    return [
        summarize(eatery)
        for eatery in catalog.eateries
        if needle in eatery.name.lower()
    ]
