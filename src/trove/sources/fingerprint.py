"""
Modification-time fingerprints for change detection.

A fingerprint set maps each absolute ``.json`` file path to its
``st_mtime_ns``. Two sets are compared to decide whether the catalog must be
rebuilt; the sets are never exposed to consumers.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping

from trove.core.logging import get_logger

log = get_logger(__name__)

JSON_SUFFIX = ".json"


def collect_fingerprints(directories: Iterable[str | Path]) -> dict[str, int]:
    """
    Scan ``directories`` and record the modification time of every JSON file.

    Directories that cannot be listed and files that cannot be stat'ed are
    skipped with a warning.
    """
    fingerprints: dict[str, int] = {}
    for directory in directories:
        root = Path(os.path.abspath(directory))
        try:
            with os.scandir(root) as it:
                entries = list(it)
        except OSError as e:
            log.warning("fingerprint.directory_unreadable", directory=str(root), error=str(e))
            continue

        for entry in entries:
            if not entry.name.endswith(JSON_SUFFIX):
                continue
            try:
                if entry.is_dir():
                    continue
                fingerprints[str(root / entry.name)] = entry.stat().st_mtime_ns
            except OSError as e:
                log.warning("fingerprint.file_unreadable", path=entry.path, error=str(e))
    return fingerprints


def needs_reload(old: Mapping[str, int], new: Mapping[str, int]) -> bool:
    """
    Decide whether the source files changed between two scans.

    A change is a different file count, a file added or removed, or a
    modification time that moved forward.
    """
    if len(old) != len(new):
        return True
    for path, old_time in old.items():
        new_time = new.get(path)
        if new_time is None or new_time > old_time:
            return True
    for path in new:
        if path not in old:
            return True
    return False


__all__ = ["JSON_SUFFIX", "collect_fingerprints", "needs_reload"]
