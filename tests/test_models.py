"""Tests for trove.models - snapshot document shapes."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from _support.documents import account_doc, character_doc, raw_bank, raw_item
from trove.models import AccountDocument, Bank, CharacterDocument, Item


class TestItem:
    """Test the Item record."""

    def test_reads_pascal_case_keys(self):
        item = Item.model_validate(
            raw_item("Flaming Sword", MinimumLevel=12, EquipsTo=["MainHand", "OffHand"])
        )
        assert item.name == "Flaming Sword"
        assert item.minimum_level == 12
        assert item.equips_to == ["MainHand", "OffHand"]

    def test_accepts_snake_case_names(self):
        item = Item(name="Ring", item_type="Jewelry", minimum_level=3)
        assert item.item_type == "Jewelry"
        assert item.minimum_level == 3

    def test_unknown_keys_ignored(self):
        item = Item.model_validate({"Name": "Cloak", "SomethingNew": 1})
        assert item.name == "Cloak"

    def test_null_fields_read_as_defaults(self):
        item = Item.model_validate(
            {"Name": "Bare", "EquipsTo": None, "Effects": None, "Description": None}
        )
        assert item.equips_to == []
        assert item.effects == []
        assert item.description == ""
        assert item.clicky is None

    def test_nested_effects_and_clicky(self):
        item = Item.model_validate(
            raw_item(
                "Wand",
                Effects=[{"Name": "Fire Lore", "Description": "Boosts fire spells"}],
                Clicky={"SpellName": "Fireball", "SpellDescription": "Boom", "CasterLevel": 5},
            )
        )
        assert item.effects[0].name == "Fire Lore"
        assert item.clicky is not None
        assert item.clicky.spell_name == "Fireball"
        assert item.clicky.caster_level == 5

    def test_null_list_elements_dropped(self):
        item = Item.model_validate(
            raw_item("Ring", EquipsTo=["Finger", None], Effects=[None, {"Name": "Glow"}])
        )
        assert item.equips_to == ["Finger"]
        assert [effect.name for effect in item.effects] == ["Glow"]

    def test_item_is_frozen(self):
        item = Item(name="Sword")
        with pytest.raises(ValidationError):
            item.name = "Axe"

    def test_with_owner_returns_copy(self):
        item = Item(name="Sword", character_name="Original")
        owned = item.with_owner("Alice")
        assert owned.character_name == "Alice"
        assert owned.name == "Sword"
        assert item.character_name == "Original"

    def test_dump_by_alias_uses_pascal_case(self):
        data = Item(name="Sword", minimum_level=4).model_dump(by_alias=True)
        assert data["Name"] == "Sword"
        assert data["MinimumLevel"] == 4


class TestBank:
    """Test Bank traversal."""

    def test_iter_items_visits_every_page(self):
        bank = Bank.model_validate(raw_bank([raw_item("A"), raw_item("B")], [raw_item("C")]))
        assert sorted(item.name for item in bank.iter_items()) == ["A", "B", "C"]

    def test_iter_items_across_tabs(self):
        bank = Bank.model_validate(
            {
                "Tabs": {
                    "0": {"Pages": {"0": {"Items": [raw_item("A")]}}},
                    "7": {"Pages": {"3": {"Items": [raw_item("B")]}}},
                }
            }
        )
        assert sorted(item.name for item in bank.iter_items()) == ["A", "B"]

    def test_tab_key_order_does_not_matter(self):
        tabs = {
            "1": {"Pages": {"0": {"Items": [raw_item("Potion", Tab=1)]}}},
            "0": {"Pages": {"0": {"Items": [raw_item("Potion", Tab=0)]}}},
        }
        forward = Bank.model_validate({"Tabs": tabs})
        backward = Bank.model_validate({"Tabs": dict(reversed(list(tabs.items())))})
        assert [item.tab for item in forward.iter_items()] == [0, 1]
        assert [item.tab for item in backward.iter_items()] == [0, 1]

    def test_indices_sort_numerically(self):
        bank = Bank.model_validate(
            {
                "Tabs": {
                    "0": {
                        "Pages": {
                            "10": {"Items": [raw_item("C")]},
                            "2": {"Items": [raw_item("B")]},
                            "extra": {"Items": [raw_item("D")]},
                            "0": {"Items": [raw_item("A")]},
                        }
                    }
                }
            }
        )
        assert [item.name for item in bank.iter_items()] == ["A", "B", "C", "D"]

    def test_null_page_is_skipped(self):
        bank = Bank.model_validate({"Tabs": {"0": {"Pages": {"0": None, "1": {"Items": [raw_item("A")]}}}}})
        assert [item.name for item in bank.iter_items()] == ["A"]

    def test_empty_bank(self):
        assert list(Bank().iter_items()) == []

    def test_null_tabs(self):
        bank = Bank.model_validate({"BankType": 2, "Tabs": None})
        assert list(bank.iter_items()) == []


class TestCharacterDocument:
    """Test character payload detection."""

    def test_named_character_has_payload(self):
        doc = CharacterDocument.model_validate(character_doc("Alice"))
        assert doc.has_payload() is True

    def test_nameless_with_inventory_has_payload(self):
        doc = CharacterDocument.model_validate({"Inventory": [raw_item("Potion")]})
        assert doc.has_payload() is True

    def test_nameless_with_bank_has_payload(self):
        doc = CharacterDocument.model_validate({"PersonalBank": {}})
        assert doc.has_payload() is True

    def test_empty_document_has_no_payload(self):
        doc = CharacterDocument.model_validate({})
        assert doc.has_payload() is False

    def test_account_json_has_no_character_payload(self):
        raw = json.dumps(account_doc(shared=raw_bank([raw_item("Ring")])))
        doc = CharacterDocument.model_validate_json(raw)
        assert doc.has_payload() is False


class TestAccountDocument:
    """Test account payload detection."""

    def test_shared_bank_is_payload(self):
        doc = AccountDocument.model_validate(account_doc(shared=raw_bank([])))
        assert doc.has_payload() is True

    def test_crafting_bank_is_payload(self):
        doc = AccountDocument.model_validate(account_doc(crafting=raw_bank([])))
        assert doc.has_payload() is True

    def test_metadata_only_is_not_payload(self):
        doc = AccountDocument.model_validate(account_doc())
        assert doc.has_payload() is False
