"""Filter vocabularies derived from the item catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from trove.models import Item


@dataclass(frozen=True)
class Vocabularies:
    """Sorted, de-duplicated option lists for filter selectors."""

    item_types: tuple[str, ...] = ()
    item_sub_types: tuple[str, ...] = ()
    character_names: tuple[str, ...] = ()
    equips_to: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "item_types": list(self.item_types),
            "item_sub_types": list(self.item_sub_types),
            "character_names": list(self.character_names),
            "equips_to": list(self.equips_to),
        }


def _unique_sorted(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted({value for value in values if value}))


def extract_vocabularies(items: Sequence[Item]) -> Vocabularies:
    """
    Collect the distinct item types, sub-types, owners and equip slots.

    Empty strings are left out of every list.
    """
    return Vocabularies(
        item_types=_unique_sorted(item.item_type for item in items),
        item_sub_types=_unique_sorted(item.item_sub_type for item in items),
        character_names=_unique_sorted(item.character_name for item in items),
        equips_to=_unique_sorted(slot for item in items for slot in item.equips_to),
    )


__all__ = ["Vocabularies", "extract_vocabularies"]
