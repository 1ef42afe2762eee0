"""Watch command: keep the catalog loaded and follow source changes."""

import threading
from typing import Optional

import typer
from typing_extensions import Annotated

from trove.core.logging import get_logger
from trove.core.settings import get_settings

from ..console import console
from ..params import DirsArgument, load_catalog

log = get_logger(__name__)


def watch(
    dirs: DirsArgument = None,
    interval: Annotated[
        Optional[float],
        typer.Option("--interval", "-i", min=0.01, help="Seconds between change checks"),
    ] = None,
    duration: Annotated[
        Optional[float],
        typer.Option("--duration", min=0.0, help="Stop after this many seconds (default: run until Ctrl+C)"),
    ] = None,
) -> None:
    """Load the catalog and reload it whenever snapshot files change."""
    catalog = load_catalog(dirs)
    interval_seconds = interval or get_settings().reload_interval

    snapshot = catalog.current_snapshot()
    console.print(
        f"[green]Watching {len(catalog.directories)} director(ies)[/green] "
        f"[dim]({snapshot.item_count} items, every {interval_seconds:g}s)[/dim]"
    )

    catalog.start(interval_seconds)
    stop = threading.Event()
    try:
        stop.wait(duration)
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopping[/yellow]")
    finally:
        catalog.stop()

    health = catalog.health()
    log.info("watch.finished", **{k: v for k, v in health.items() if k != "scheduler"})
    console.print(
        f"[dim]Generation {health['generation']}, {health['items']} items, "
        f"{health['reload_count']} reload(s)[/dim]"
    )
