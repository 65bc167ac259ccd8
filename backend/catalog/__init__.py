from .catalog import Catalog, DroppedBlob
from .loader import CatalogSourceError, load_catalog
from .parser import MalformedEateryError, parse_eatery
from .query import get_eatery, list_eateries, search_eateries
from models import summarize

__all__ = [
    "Catalog",
    "CatalogSourceError",
    "DroppedBlob",
    "MalformedEateryError",
    "get_eatery",
    "list_eateries",
    "load_catalog",
    "parse_eatery",
    "search_eateries",
    "summarize",
]
