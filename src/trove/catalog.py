"""
Reload supervisor: owns the published item catalog.

The catalog publishes one immutable ``Snapshot`` holding the items, the
fingerprints they were loaded from, and the vocabularies derived from them.
Everything that reads the catalog goes through ``current_snapshot()``:

- readers hold the lock only long enough to copy the snapshot reference,
  then filter and paginate on their private reference
- the reloader scans, parses and derives vocabularies without the lock, then
  swaps the reference under the lock

A reader therefore always sees items and vocabularies from the same load.

States::

    Idle ──tick──► Scanning ──no change──────────► Idle (same snapshot)
                      │
                      ├──change, load fails──────► Idle (same snapshot, logged)
                      └──change, load succeeds───► Idle (new snapshot)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from trove.core.errors import TroveError
from trove.core.logging import get_logger
from trove.models import Item
from trove.scheduling import ReloadScheduler
from trove.search import DEFAULT_PAGE_SIZE, FilterParams, PageResult, filter_items, paginate
from trove.sources import aggregator
from trove.sources.fingerprint import collect_fingerprints, needs_reload
from trove.vocabulary import Vocabularies, extract_vocabularies

log = get_logger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """One published, read-only state of the catalog."""

    items: tuple[Item, ...] = ()
    vocabularies: Vocabularies = field(default_factory=Vocabularies)
    fingerprints: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    loaded_at: datetime | None = None
    generation: int = 0

    @property
    def item_count(self) -> int:
        return len(self.items)


def build_snapshot(
    items: Sequence[Item],
    fingerprints: Mapping[str, int],
    generation: int,
) -> Snapshot:
    """Freeze a loaded item list into a publishable snapshot."""
    frozen_items = tuple(items)
    return Snapshot(
        items=frozen_items,
        vocabularies=extract_vocabularies(frozen_items),
        fingerprints=MappingProxyType(dict(fingerprints)),
        loaded_at=datetime.now(UTC),
        generation=generation,
    )


class Catalog:
    """
    Item catalog with live reload.

    Example:
        catalog = Catalog(["/data/trove"])
        catalog.load()
        catalog.start(interval_seconds=60)

        snapshot = catalog.current_snapshot()
        hits = filter_items(snapshot.items, FilterParams(name_search="sword"))

        catalog.stop()
    """

    def __init__(
        self,
        directories: Sequence[str | Path],
        scheduler: ReloadScheduler | None = None,
    ) -> None:
        self._directories = list(directories)
        self._scheduler = scheduler or ReloadScheduler()
        self._lock = threading.Lock()
        self._reload_guard = threading.Lock()
        self._snapshot = Snapshot()
        self._reload_count = 0
        self._failed_reloads = 0

    @property
    def directories(self) -> list[str | Path]:
        return list(self._directories)

    def current_snapshot(self) -> Snapshot:
        """Return the latest published snapshot."""
        with self._lock:
            return self._snapshot

    def _publish(self, snapshot: Snapshot) -> None:
        with self._lock:
            self._snapshot = snapshot

    def _next_generation(self) -> int:
        return self.current_snapshot().generation + 1

    def load(self) -> Snapshot:
        """
        Load all directories and publish the result unconditionally.

        Used for the initial load at startup.

        Raises:
            TroveError: If the load cannot run at all
        """
        with self._reload_guard:
            fingerprints = collect_fingerprints(self._directories)
            items = aggregator.load(self._directories)
            snapshot = build_snapshot(items, fingerprints, self._next_generation())
            self._publish(snapshot)

        log.info(
            "catalog.loaded",
            items=snapshot.item_count,
            files=len(fingerprints),
            dirs=len(self._directories),
        )
        return snapshot

    def reload_if_changed(self) -> bool:
        """
        Rebuild the catalog if any source file changed since the last load.

        Returns:
            True if a new snapshot was published
        """
        if not self._reload_guard.acquire(blocking=False):
            log.debug("catalog.reload_in_progress")
            return False
        try:
            return self._reload_locked()
        finally:
            self._reload_guard.release()

    def _reload_locked(self) -> bool:
        fingerprints = collect_fingerprints(self._directories)
        current = self.current_snapshot()

        if not needs_reload(current.fingerprints, fingerprints):
            return False

        log.info("catalog.change_detected", files=len(fingerprints))
        try:
            items = aggregator.load(self._directories)
        except TroveError as e:
            self._failed_reloads += 1
            log.error("catalog.reload_failed", **e.to_dict())
            return False

        snapshot = build_snapshot(items, fingerprints, current.generation + 1)
        self._publish(snapshot)
        self._reload_count += 1

        log.info("catalog.reloaded", items=snapshot.item_count, generation=snapshot.generation)
        return True

    def query(self, params: FilterParams, page_size: int = DEFAULT_PAGE_SIZE) -> PageResult:
        """Filter the current snapshot and return the requested page."""
        snapshot = self.current_snapshot()
        return paginate(filter_items(snapshot.items, params), params.page, page_size)

    # -------------------------------------------------------------------------
    # BACKGROUND RELOAD
    # -------------------------------------------------------------------------

    def start(self, interval_seconds: float) -> None:
        """Poll for source changes every ``interval_seconds`` in the background."""

        async def _tick() -> None:
            self.reload_if_changed()

        self._scheduler.start(_tick, interval_seconds=interval_seconds)

    def stop(self) -> None:
        """Stop background polling. In-flight readers are unaffected."""
        self._scheduler.stop()

    def health(self) -> dict[str, Any]:
        snapshot = self.current_snapshot()
        return {
            "items": snapshot.item_count,
            "files": len(snapshot.fingerprints),
            "generation": snapshot.generation,
            "loaded_at": snapshot.loaded_at.isoformat() if snapshot.loaded_at else None,
            "reload_count": self._reload_count,
            "failed_reloads": self._failed_reloads,
            "scheduler": self._scheduler.health(),
        }


__all__ = ["Catalog", "Snapshot", "build_snapshot"]
