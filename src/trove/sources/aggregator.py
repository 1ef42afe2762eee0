"""
Aggregator: load every snapshot file from a list of directories.

Partial success is the normal case. A missing directory, a path that is not
a directory, an unreadable listing or a malformed file is logged and skipped.
Only two conditions fail the whole load:

- a directory path cannot be resolved to an absolute path
  (``AggregationError``)
- not one configured directory could be listed
  (``NoUsableDirectoriesError``)
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Sequence

from trove.core.errors import AggregationError, NoUsableDirectoriesError
from trove.core.logging import get_logger
from trove.models import Item
from trove.sources.fingerprint import JSON_SUFFIX
from trove.sources.normalizer import normalize_file

log = get_logger(__name__)


def list_source_files(directory: Path) -> list[Path]:
    """
    List the JSON snapshot files directly inside ``directory``.

    Sub-directories are ignored and the suffix match is case-sensitive.
    Files are returned sorted by name.

    Raises:
        OSError: If the directory cannot be listed
    """
    files = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir() or not entry.name.endswith(JSON_SUFFIX):
                continue
            files.append(directory / entry.name)
    return sorted(files, key=lambda p: p.name)


def _resolve(directory: str | Path) -> Path:
    try:
        return Path(os.path.abspath(directory))
    except OSError as e:
        raise AggregationError(
            f"Cannot resolve absolute path for {directory}", cause=e
        ).with_context(directory=str(directory))


def load(directories: Sequence[str | Path]) -> list[Item]:
    """
    Load and normalize every snapshot file in ``directories``.

    Items are concatenated in directory order, then file-name order within
    each directory.

    Args:
        directories: Source directories, in priority order

    Returns:
        The aggregated item list

    Raises:
        AggregationError: If a directory path cannot be resolved
        NoUsableDirectoriesError: If no directory could be listed
    """
    items: list[Item] = []
    usable = 0

    for directory in directories:
        path = _resolve(directory)

        try:
            info = path.stat()
        except FileNotFoundError:
            log.warning("aggregate.directory_missing", directory=str(path))
            continue
        except OSError as e:
            log.warning("aggregate.directory_unavailable", directory=str(path), error=str(e))
            continue
        if not stat.S_ISDIR(info.st_mode):
            log.warning("aggregate.not_a_directory", directory=str(path))
            continue

        try:
            files = list_source_files(path)
        except OSError as e:
            log.error("aggregate.directory_unreadable", directory=str(path), error=str(e))
            continue

        usable += 1
        before = len(items)
        for file_path in files:
            items.extend(normalize_file(file_path))
        log.debug(
            "aggregate.directory_loaded",
            directory=str(path),
            files=len(files),
            items=len(items) - before,
        )

    if usable == 0:
        raise NoUsableDirectoriesError([str(d) for d in directories])

    return items


__all__ = ["list_source_files", "load"]
