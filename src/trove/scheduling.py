"""Threading-based interval scheduler that drives catalog reloads.

The loop runs in a daemon thread::

    while not stop_event.wait(interval):
        tick_count += 1
        last_tick = now()
        asyncio.run(tick_callback())

``stop()`` sets the event and joins the thread, so shutdown never interrupts
a tick halfway through. A failing tick is logged and the loop carries on.
"""

from __future__ import annotations

import asyncio
import threading
from datetime import UTC, datetime
from typing import Any, Awaitable, Callable

from trove.core.logging import get_logger

logger = get_logger(__name__)

TickCallback = Callable[[], Awaitable[None]]


class ReloadScheduler:
    """Daemon-thread scheduler calling an async tick callback on an interval.

    Example:
        >>> scheduler = ReloadScheduler()
        >>>
        >>> async def tick():
        ...     catalog.reload_if_changed()
        ...
        >>> scheduler.start(tick, interval_seconds=60.0)
        >>> # ... later ...
        >>> scheduler.stop()
    """

    name = "thread"

    def __init__(self, thread_name: str = "trove-reload") -> None:
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._thread_name = thread_name
        self._tick_count = 0
        self._failed_ticks = 0
        self._last_tick: datetime | None = None
        self._interval: float = 60.0
        self._started = False
        self._lock = threading.Lock()

    def start(self, tick_callback: TickCallback, interval_seconds: float = 60.0) -> None:
        """Start the loop in a daemon thread.

        Args:
            tick_callback: Async function to call on each tick.
            interval_seconds: How often to tick.
        """
        if self._started:
            logger.warning("scheduler.already_started")
            return
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")

        self._interval = interval_seconds
        self._stop_event.clear()

        def _loop() -> None:
            logger.info("scheduler.started", interval_seconds=interval_seconds)
            while not self._stop_event.wait(interval_seconds):
                with self._lock:
                    self._tick_count += 1
                    self._last_tick = datetime.now(UTC)

                try:
                    asyncio.run(tick_callback())
                except Exception:
                    with self._lock:
                        self._failed_ticks += 1
                    logger.exception("scheduler.tick_failed")

            logger.info("scheduler.stopped")

        self._thread = threading.Thread(target=_loop, daemon=True, name=self._thread_name)
        self._thread.start()
        self._started = True

    def stop(self, timeout: float = 5.0) -> None:
        """Stop the loop, waiting up to ``timeout`` seconds for the current tick."""
        if not self._started:
            return

        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("scheduler.stop_timeout", timeout=timeout)

        self._started = False

    def health(self) -> dict[str, Any]:
        """Return scheduler health.

        Returns:
            dict with healthy, backend, tick_count, failed_ticks, last_tick
        """
        with self._lock:
            return {
                "healthy": self.is_running,
                "backend": self.name,
                "tick_count": self._tick_count,
                "failed_ticks": self._failed_ticks,
                "last_tick": self._last_tick.isoformat() if self._last_tick else None,
                "interval_seconds": self._interval,
            }

    @property
    def is_running(self) -> bool:
        return self._started and self._thread is not None and self._thread.is_alive()

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def last_tick(self) -> datetime | None:
        return self._last_tick


__all__ = ["ReloadScheduler", "TickCallback"]
