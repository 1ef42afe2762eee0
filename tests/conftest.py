"""
Shared pytest fixtures for trove tests.

This module provides:
- Settings isolation from TROVE_* environment variables
- A temporary source directory and a JSON writer
- A populated source directory mixing valid and invalid files

Usage:
    def test_something(source_dir, write_json):
        write_json(source_dir / "Alice.json", character_doc("Alice", inventory=[raw_item("Sword")]))
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

# Ensure trove package and test helpers are importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from _support.documents import account_doc, character_doc, raw_bank, raw_item
from trove.core.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from TROVE_* environment variables and cached settings."""
    for key in list(os.environ):
        if key.startswith("TROVE_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Write a JSON document to a path and return the path."""

    def _write(path: Path, data: Any) -> Path:
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """An empty source directory."""
    directory = tmp_path / "trove"
    directory.mkdir()
    return directory


@pytest.fixture
def populated_dir(source_dir: Path, write_json) -> Path:
    """
    A source directory with one character, one account, one malformed JSON
    file and one non-JSON file. The two valid files hold four items.
    """
    write_json(
        source_dir / "Alice.json",
        character_doc(
            "Alice",
            personal=raw_bank([raw_item("Flaming Sword", EquipsTo=["MainHand"])]),
            inventory=[raw_item("Healing Potion", ItemType="Consumable", MinimumLevel=0)],
        ),
    )
    write_json(
        source_dir / "account.json",
        account_doc(
            shared=raw_bank([raw_item("Shared Ring", ItemType="Jewelry", EquipsTo=["Finger"])]),
            crafting=raw_bank([raw_item("Cannith Essence", ItemType="Ingredient")]),
        ),
    )
    (source_dir / "broken.json").write_text("{not json", encoding="utf-8")
    (source_dir / "notes.txt").write_text("ignore me", encoding="utf-8")
    return source_dir
