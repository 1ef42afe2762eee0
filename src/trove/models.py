"""
Record model for Trove snapshot files.

A snapshot file is one of two JSON root shapes:

- ``CharacterDocument``: one character's personal bank, reincarnation bank
  and flat inventory list.
- ``AccountDocument``: account-wide shared bank and crafting bank.

Banks nest ``Bank -> Tab -> Page -> Item``. Tabs and pages are keyed by
string indices; their JSON key order carries no meaning, so traversal sorts
them by index.

JSON keys are PascalCase (``MinimumLevel``, ``EquipsTo``); the models expose
snake_case attributes and accept either spelling. A JSON ``null`` is read as
the field's default, so ``"Inventory": null`` is an empty inventory. A
``null`` list element or mapping value is dropped rather than failing the
whole document.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_pascal

ACCOUNT_SHARED_BANK = "Account (Shared Bank)"
ACCOUNT_CRAFTING_BANK = "Account (Crafting Bank)"


class TroveModel(BaseModel):
    """Base for all snapshot models."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        if isinstance(value, list):
            return [element for element in value if element is not None]
        if isinstance(value, dict):
            return {key: element for key, element in value.items() if element is not None}
        return value


def _index_order(key: str) -> tuple[int, int | str]:
    """Sort key for tab/page indices: numeric keys numerically, others after."""
    return (0, int(key)) if key.isascii() and key.isdigit() else (1, key)


class Clicky(TroveModel):
    """Triggerable spell effect attached to an item."""

    model_config = ConfigDict(frozen=True)

    spell_name: str = ""
    spell_description: str = ""
    caster_level: int = 0
    valid_targets: list[str] = Field(default_factory=list)


class AugmentSlot(TroveModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    color: str = ""


class Effect(TroveModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""


class Item(TroveModel):
    """
    One item record as served to consumers.

    ``character_name`` is the owner display name. It is always overwritten
    during normalization, whatever the raw payload carried.
    """

    model_config = ConfigDict(frozen=True)

    # Ownership
    owner_id: int = 0
    character_name: str = ""

    # Position within the source hierarchy
    item_id: int = 0
    container: str = ""
    tab: int = 0
    tab_name: str = ""
    row: int = 0
    column: int = 0
    quantity: int = 0

    # Identity and classification
    weenie_id: int = 0
    charges: int = 0
    max_charges: int = 0
    treasure_type: str = ""
    name: str = ""
    description: str = ""
    minimum_level: int = 0
    binding: str = ""
    item_type: str = ""
    item_sub_type: str = ""
    base_value_copper: int = 0
    hardness: int = 0
    equips_to_flags: int = 0
    equips_to: list[str] = Field(default_factory=list)
    icon_source: str = ""
    proficiency: str = ""
    weapon_type: str = ""
    armor_type: str = ""

    # Effects
    clicky: Clicky | None = None
    augment_slots: list[AugmentSlot] = Field(default_factory=list)
    effects: list[Effect] = Field(default_factory=list)
    hover: str = ""
    set_bonus1_name: str = ""
    set_bonus1_description: list[str] = Field(default_factory=list)
    minor_artifact: bool = False

    def with_owner(self, owner: str) -> Item:
        """Return a copy of this item attributed to ``owner``."""
        return self.model_copy(update={"character_name": owner})


class Page(TroveModel):
    items: list[Item] = Field(default_factory=list)


class Tab(TroveModel):
    id: int = 0
    name: str = ""
    index: int = 0
    pages: dict[str, Page] = Field(default_factory=dict)


class Bank(TroveModel):
    bank_type: int = 0
    tabs: dict[str, Tab] = Field(default_factory=dict)

    def iter_items(self) -> Iterator[Item]:
        """
        Yield every item on every page of every tab.

        Tabs and pages are visited in index order, never JSON key order.
        """
        for tab_key in sorted(self.tabs, key=_index_order):
            pages = self.tabs[tab_key].pages
            for page_key in sorted(pages, key=_index_order):
                yield from pages[page_key].items


class CharacterDocument(TroveModel):
    """Snapshot of one character's possessions."""

    character_id: int = 0
    name: str = ""
    last_updated: datetime | None = None
    personal_bank: Bank | None = None
    reincarnation_bank: Bank | None = None
    inventory: list[Item] = Field(default_factory=list)
    server: str = ""
    subscription_key_hash: str = ""
    subscription_alias: str | None = None
    used_capacity: int = 0
    max_capacity: int = 0

    def has_payload(self) -> bool:
        """True when the document names a character or holds any storage."""
        return (
            self.name != ""
            or self.personal_bank is not None
            or self.reincarnation_bank is not None
            or len(self.inventory) > 0
        )


class AccountDocument(TroveModel):
    """Snapshot of account-wide storage, not tied to a character."""

    shared_bank: Bank | None = None
    crafting_bank: Bank | None = None
    server: str = ""
    subscription_key_hash: str = ""
    subscription_alias: str | None = None
    used_capacity: int = 0
    max_capacity: int = 0

    def has_payload(self) -> bool:
        """True when the document holds a shared or crafting bank."""
        return self.shared_bank is not None or self.crafting_bank is not None


__all__ = [
    "ACCOUNT_CRAFTING_BANK",
    "ACCOUNT_SHARED_BANK",
    "AccountDocument",
    "AugmentSlot",
    "Bank",
    "CharacterDocument",
    "Clicky",
    "Effect",
    "Item",
    "Page",
    "Tab",
]
