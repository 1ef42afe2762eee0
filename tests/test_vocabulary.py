"""Tests for trove.vocabulary - filter option lists."""

from __future__ import annotations

from trove.models import ACCOUNT_SHARED_BANK, Item
from trove.vocabulary import Vocabularies, extract_vocabularies


def _items() -> list[Item]:
    return [
        Item(name="Sword", item_type="Weapon", item_sub_type="Longsword",
             character_name="Bob", equips_to=["MainHand", "OffHand"]),
        Item(name="Axe", item_type="Weapon", item_sub_type="Battleaxe",
             character_name="Alice", equips_to=["MainHand"]),
        Item(name="Ring", item_type="Jewelry", character_name=ACCOUNT_SHARED_BANK,
             equips_to=["Finger"]),
        Item(name="Gem", item_type="", character_name="Alice"),
    ]


class TestExtractVocabularies:
    """Test vocabulary extraction."""

    def test_sorted_and_unique(self):
        vocab = extract_vocabularies(_items())
        assert vocab.item_types == ("Jewelry", "Weapon")
        assert vocab.item_sub_types == ("Battleaxe", "Longsword")
        assert vocab.character_names == (ACCOUNT_SHARED_BANK, "Alice", "Bob")
        assert vocab.equips_to == ("Finger", "MainHand", "OffHand")

    def test_empty_strings_excluded_everywhere(self):
        vocab = extract_vocabularies(
            [Item(name="Blank", item_type="", item_sub_type="", character_name="", equips_to=[""])]
        )
        assert vocab == Vocabularies()

    def test_idempotent(self):
        items = _items()
        assert extract_vocabularies(items) == extract_vocabularies(items)

    def test_order_independent(self):
        items = _items()
        assert extract_vocabularies(items) == extract_vocabularies(list(reversed(items)))

    def test_empty_catalog(self):
        assert extract_vocabularies([]) == Vocabularies()

    def test_to_dict(self):
        data = extract_vocabularies(_items()).to_dict()
        assert set(data) == {"item_types", "item_sub_types", "character_names", "equips_to"}
        assert data["item_types"] == ["Jewelry", "Weapon"]
