"""
Source normalizer: one snapshot file in, flat item records out.

Decoding is an explicit two-case tagged decode. Every field of both document
shapes is optional, so an account file decodes cleanly against the character
shape and simply comes out empty. A shape is therefore accepted only when its
``has_payload()`` predicate holds, not merely when decoding succeeds:

1. decode as ``CharacterDocument``; accept if it has a payload
2. decode as ``AccountDocument``; accept if it has a payload
3. otherwise the file is unrecognized

Normalization never retains state between calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from trove.core.errors import ParseError, SourceError
from trove.core.logging import get_logger
from trove.models import (
    ACCOUNT_CRAFTING_BANK,
    ACCOUNT_SHARED_BANK,
    AccountDocument,
    Bank,
    CharacterDocument,
    Item,
)

log = get_logger(__name__)

SourceDocument = CharacterDocument | AccountDocument


def _decode_as(model: type[SourceDocument], raw: bytes) -> SourceDocument | None:
    try:
        document = model.model_validate_json(raw)
    except ValidationError:
        return None
    return document if document.has_payload() else None


def decode_document(raw: bytes) -> SourceDocument | None:
    """
    Interpret raw file content as a character or account document.

    Args:
        raw: File content (UTF-8 JSON)

    Returns:
        The first shape with meaningful content, or None if neither has any
    """
    document = _decode_as(CharacterDocument, raw)
    if document is None:
        document = _decode_as(AccountDocument, raw)
    return document


def _owned(items: Iterable[Item], owner: str) -> list[Item]:
    return [item.with_owner(owner) for item in items]


def _bank_items(bank: Bank | None, owner: str) -> list[Item]:
    if bank is None:
        return []
    return _owned(bank.iter_items(), owner)


def normalize_document(document: SourceDocument) -> list[Item]:
    """Flatten a decoded document into items tagged with their owner."""
    if isinstance(document, CharacterDocument):
        owner = document.name
        return (
            _bank_items(document.personal_bank, owner)
            + _bank_items(document.reincarnation_bank, owner)
            + _owned(document.inventory, owner)
        )
    return _bank_items(document.shared_bank, ACCOUNT_SHARED_BANK) + _bank_items(
        document.crafting_bank, ACCOUNT_CRAFTING_BANK
    )


def normalize_file(path: Path) -> list[Item]:
    """
    Read and normalize one snapshot file.

    Unreadable or unrecognized files yield no items and a warning; they never
    raise.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        error = SourceError(f"Cannot read {path.name}", cause=e).with_context(
            path=str(path), directory=str(path.parent)
        )
        log.warning("source_file_unreadable", **error.to_dict())
        return []

    document = decode_document(raw)
    if document is None:
        error = ParseError(
            f"{path.name} is neither a character nor an account snapshot"
        ).with_context(path=str(path), directory=str(path.parent))
        log.warning("source_file_unrecognized", **error.to_dict())
        return []

    items = normalize_document(document)
    log.debug(
        "source_file_normalized",
        path=str(path),
        kind=type(document).__name__,
        items=len(items),
    )
    return items


__all__ = ["SourceDocument", "decode_document", "normalize_document", "normalize_file"]
