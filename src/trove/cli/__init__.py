"""Command-line interface for the trove catalog using Typer."""

from typing import Optional

import typer
from typing_extensions import Annotated

from trove import __version__
from trove.core.errors import TroveError
from trove.core.logging import configure_logging
from trove.core.settings import get_settings

from .commands import query, watch
from .console import console
from .ui import render_trove_error

app = typer.Typer(
    name="trove",
    help="Trove - browse items across character and account snapshots",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("query")(query.query_items)
app.command("vocab")(query.list_vocabularies)
app.command("watch")(watch.watch)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"trove, version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level (default: TROVE_LOG_LEVEL or INFO)"),
    ] = None,
    log_format: Annotated[
        Optional[str],
        typer.Option("--log-format", help="Log format: console or json"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """
    Trove - browse items across character and account snapshots.
    """
    try:
        settings = get_settings()
    except TroveError as e:
        render_trove_error(e)
        raise typer.Exit(1) from None
    level = "DEBUG" if verbose else (log_level or settings.effective_log_level)
    configure_logging(level=level.upper(), format=log_format or settings.log_format, force=True)


def cli_main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    cli_main()
