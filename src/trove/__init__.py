"""
Trove - item catalog over game snapshot files.

Loads character and account snapshot JSON files from one or more
directories, flattens them into a single list of owner-tagged items, and
serves filtered views that follow the files on disk.

Core entry points:
- trove.sources.load: aggregate directories into an item list
- trove.search.filter_items: predicate filter with two-tier relevance
- trove.vocabulary.extract_vocabularies: option lists for filter selectors
- trove.catalog.Catalog: published snapshot with background reload
"""

__version__ = "0.1.0"

from trove.catalog import Catalog, Snapshot
from trove.models import (
    ACCOUNT_CRAFTING_BANK,
    ACCOUNT_SHARED_BANK,
    AccountDocument,
    CharacterDocument,
    Item,
)
from trove.search import FILTER_ALL, FilterParams, PageResult, filter_items, paginate
from trove.sources import load
from trove.vocabulary import Vocabularies, extract_vocabularies

__all__ = [
    "ACCOUNT_CRAFTING_BANK",
    "ACCOUNT_SHARED_BANK",
    "AccountDocument",
    "Catalog",
    "CharacterDocument",
    "FILTER_ALL",
    "FilterParams",
    "Item",
    "PageResult",
    "Snapshot",
    "Vocabularies",
    "__version__",
    "extract_vocabularies",
    "filter_items",
    "load",
    "paginate",
]
