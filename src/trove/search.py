"""
Filter and search over the item catalog.

Filtering is a pure function of the item list and a ``FilterParams``:

1. Structural predicates (type, sub-type, owner, level range, equip slot)
   must all hold; a failing item is dropped before text search.
2. With an empty ``name_search`` every remaining item is a name-tier match.
3. Otherwise matching is case-insensitive substring search in two tiers:
   - name tier: the query occurs in the item name
   - secondary tier: the query occurs in the description, an effect name or
     description, or the clicky spell name or description
4. Name-tier matches come first, then secondary-tier matches, each sorted by
   name. Items with equal names keep their catalog order.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from trove.models import Item

FILTER_ALL = "All"

DEFAULT_MIN_LEVEL = 0
DEFAULT_MAX_LEVEL = 40
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 100


class FilterParams(BaseModel):
    """Predicate set for :func:`filter_items`."""

    model_config = ConfigDict(frozen=True)

    item_type: str = FILTER_ALL
    item_sub_type: str = FILTER_ALL
    character_name: str = FILTER_ALL
    name_search: str = ""
    equips_to: str = FILTER_ALL
    min_level: int = DEFAULT_MIN_LEVEL
    max_level: int = DEFAULT_MAX_LEVEL
    page: int = Field(DEFAULT_PAGE, ge=1)

    @classmethod
    def from_mapping(cls, query: Mapping[str, Any]) -> FilterParams:
        """
        Build params from loosely typed string values.

        This is the entry point for web front ends that hand over a parsed
        query string; the CLI parses typed options and builds ``FilterParams``
        directly. Unlike the constructor it never raises: empty selectors
        become ``All``, and levels that are not non-negative integers or
        pages below 1 fall back to their defaults.
        """
        return cls(
            item_type=_selector(query.get("item_type")),
            item_sub_type=_selector(query.get("item_sub_type")),
            character_name=_selector(query.get("character_name")),
            name_search=str(query.get("name_search") or ""),
            equips_to=_selector(query.get("equips_to")),
            min_level=_parse_int(query.get("min_level"), DEFAULT_MIN_LEVEL, minimum=0),
            max_level=_parse_int(query.get("max_level"), DEFAULT_MAX_LEVEL, minimum=0),
            page=_parse_int(query.get("page"), DEFAULT_PAGE, minimum=1),
        )


def _selector(value: Any) -> str:
    if value is None or value == "":
        return FILTER_ALL
    return str(value)


def _parse_int(value: Any, default: int, *, minimum: int) -> int:
    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= minimum else default


def _is_wildcard(value: str) -> bool:
    return value == "" or value == FILTER_ALL


def matches_structure(item: Item, params: FilterParams) -> bool:
    """Check every non-text predicate of ``params`` against ``item``."""
    if not _is_wildcard(params.item_type) and item.item_type != params.item_type:
        return False
    if not _is_wildcard(params.item_sub_type) and item.item_sub_type != params.item_sub_type:
        return False
    if not _is_wildcard(params.character_name) and item.character_name != params.character_name:
        return False
    if not params.min_level <= item.minimum_level <= params.max_level:
        return False
    if not _is_wildcard(params.equips_to) and params.equips_to not in item.equips_to:
        return False
    return True


def matches_secondary(item: Item, needle: str) -> bool:
    """Check ``needle`` (already lower-cased) against the non-name text of ``item``."""
    if needle in item.description.lower():
        return True
    for effect in item.effects:
        if needle in effect.name.lower() or needle in effect.description.lower():
            return True
    if item.clicky is not None:
        clicky = item.clicky
        if needle in clicky.spell_name.lower() or needle in clicky.spell_description.lower():
            return True
    return False


def filter_items(items: Sequence[Item], params: FilterParams) -> list[Item]:
    """
    Filter ``items`` and order them by relevance.

    Args:
        items: The catalog to search (not modified)
        params: Predicate set

    Returns:
        Name-tier matches sorted by name, followed by secondary-tier
        matches sorted by name
    """
    name_matches: list[Item] = []
    secondary_matches: list[Item] = []
    needle = params.name_search.lower()

    for item in items:
        if not matches_structure(item, params):
            continue
        if not params.name_search:
            name_matches.append(item)
        elif needle in item.name.lower():
            name_matches.append(item)
        elif matches_secondary(item, needle):
            secondary_matches.append(item)

    by_name = attrgetter("name")
    name_matches.sort(key=by_name)
    secondary_matches.sort(key=by_name)
    return name_matches + secondary_matches


@dataclass(frozen=True)
class PageResult:
    """One page of filtered items."""

    items: list[Item]
    page: int
    total_pages: int
    total_count: int


def paginate(
    items: Sequence[Item],
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageResult:
    """
    Slice ``items`` to one page.

    ``total_pages`` is at least 1. A page past the end falls back to the
    first page.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total_count = len(items)
    total_pages = max(1, (total_count + page_size - 1) // page_size)

    start = (page - 1) * page_size
    if page < 1 or start >= total_count:
        page = DEFAULT_PAGE
        start = 0
    end = min(start + page_size, total_count)

    return PageResult(
        items=list(items[start:end]),
        page=page,
        total_pages=total_pages,
        total_count=total_count,
    )


__all__ = [
    "DEFAULT_MAX_LEVEL",
    "DEFAULT_MIN_LEVEL",
    "DEFAULT_PAGE_SIZE",
    "FILTER_ALL",
    "FilterParams",
    "PageResult",
    "filter_items",
    "matches_secondary",
    "matches_structure",
    "paginate",
]
